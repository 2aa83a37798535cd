"""
Highlight Q&A — relays highlighted text to an LLM and returns the answer.
Flat structure: api/, core/, providers/, schemas/, services/, utils/.
"""
__version__ = "0.1.0"
