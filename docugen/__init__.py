"""
DocuGen
=======

Turns a free-text topic into a themed slide deck or document outline via an
LLM, then renders that outline into a downloadable PPTX or DOCX file.
"""

__version__ = "0.1.0"
