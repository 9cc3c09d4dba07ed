from __future__ import annotations
import logging
import os
import re
from typing import Iterable
from .datatypes import Sentence
from .summarize import format_summary

logger = logging.getLogger(__name__)

def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    text = re.sub(r'\\\*.*?;', '', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()

def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    # fenced code first so its contents are not parsed as markup
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def convert_text(content: str, filename: str) -> str:
    extension = os.path.splitext(filename)[1].lower()
    if extension == '.rtf':
        return extract_rtf_text(content)
    if extension == '.md':
        return extract_markdown_text(content)
    return content

def read_text(path: str) -> str:
    """Read a whole document into memory; raises ``OSError`` if unreadable."""
    with open(path, encoding="utf-8") as fh:
        content = fh.read()
    logger.debug("read %d characters from %s", len(content), path)
    return convert_text(content, path)

def write_summary(path: str, sentences: Iterable[Sentence]) -> None:
    # render fully before opening so a failure leaves no half-written file
    rendered = format_summary(sentences)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(rendered)
