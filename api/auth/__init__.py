"""
Registration, login and bearer-token authorization.

Tokens are opaque random strings handed to the client once; only their
SHA-256 digest is stored, together with an expiry and an optional
revocation time.
"""
