"""
QUILL - Quick Unified Interpreter for Layout of Loosely-formatted resumes

Turns loosely-structured, LLM-produced resume text into a paginated, styled PDF.

Architecture:
- Intake Context: PDF text extraction, text cleaning, LLM optimize/score collaborators
- Templating Context: Line classification, resume parsing, template catalog
- Rendering Context: Text wrapping, pagination, template rendering, PDF output
"""

__version__ = "0.1.0"
