"""
Network Context

Responsibilities:
- Tokenizes quoted-field CSV exports
- Maps LinkedIn "Connections.csv" rows onto connection records
- Summarizes connections by company

Owns: CSV tokenizing and LinkedIn column mapping
Never: Extracts text from binary documents or parses resumes
"""

from cipher.contexts.network.csv_tokenizer import (
    CsvTable,
    decode_csv_bytes,
    parse_csv,
    tokenize_csv,
)
from cipher.contexts.network.linkedin_parser import (
    LinkedInConnection,
    company_breakdown,
    parse_linkedin_connections,
)

__all__ = [
    "CsvTable",
    "LinkedInConnection",
    "company_breakdown",
    "decode_csv_bytes",
    "parse_csv",
    "parse_linkedin_connections",
    "tokenize_csv",
]
