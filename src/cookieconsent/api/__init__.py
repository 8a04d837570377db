"""FastAPI integration for cookieconsent.

Usage:
    from cookieconsent.api.deps import ConsentPolicyDep
"""
