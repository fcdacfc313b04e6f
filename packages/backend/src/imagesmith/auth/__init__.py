"""Credential handling: password policy, password hashing, token issuance.

Learn: Each piece is a small class behind a Protocol so the account
service can be wired with real implementations in create_app() and
with cheap ones in tests.
"""
