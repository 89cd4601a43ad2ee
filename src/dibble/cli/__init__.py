"""
Command-line interface entry points for dibble.

Entry points:
- dibble: Print the definition of a word
"""
