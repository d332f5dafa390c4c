"""Public reader: collections, knowledge bases and search."""
