"""image-smith — account service.

Registration and login over HTTP, backed by a relational store,
issuing signed session tokens.
"""

__version__ = "0.1.0"
