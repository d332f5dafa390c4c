"""
Docshelf - Documentation & Knowledge-Base Service

Serves structured documentation to readers and editors:
- Reader: public collections, pages, knowledge bases, articles and search
- Admin: authenticated content management for every entity
- Data Layer: PostgreSQL, Redis
"""

__version__ = "1.0.0"
