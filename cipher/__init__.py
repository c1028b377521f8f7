"""
CIPHER - Career Intake Parsing and Heuristic Extraction Routines

A local, offline ingestion engine for career documents. Recovers plain text
from resumes (PDF, DOCX, legacy DOC) and LinkedIn connection exports (CSV),
then turns resume text into a structured profile and a categorized skill list.

Architecture:
- Extraction Context: Byte-level text recovery from uploaded documents
- Intake Context: Resume segmentation, profile heuristics, skill classification
- Network Context: LinkedIn connection export tokenizing and mapping
"""

__version__ = "0.1.0"
