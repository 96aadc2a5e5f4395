"""
Classified ads: posting and listing, behind the authenticated `/api` group.
"""
