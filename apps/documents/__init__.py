"""
Uploaded documents, as far as notifications need to know about them.
"""
