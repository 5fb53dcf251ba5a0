"""Authentication and authorization.

Learn: Sessions are stateless JWTs carried in an HTTP-only cookie.
Three pieces:
1. jwt: issue and verify session tokens
2. dependencies: the access gate every protected route depends on
3. ownership: compare the authenticated identity to a resource owner
"""
