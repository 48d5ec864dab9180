"""Media Finder.

Movie and TV discovery backed by TMDb metadata and LLM completions,
including natural-language search from a free-text description.
"""

__version__ = "0.1.0"
