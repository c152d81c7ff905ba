"""
Cross-cutting pieces shared by every route: logging setup, request
logging and security headers, rate limiting and error mapping.
"""
