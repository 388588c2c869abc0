"""
HTML Parser Module
Parses HTML content into BeautifulSoup trees for diffing.
"""

from bs4 import BeautifulSoup
from typing import Union
from pathlib import Path
import logging

from .file_utils import is_html_file, read_file_content

logger = logging.getLogger(__name__)


class HTMLParser:
    """Parser for HTML content."""

    def __init__(self, features: str = 'html.parser'):
        """Initialize the HTML parser with a BeautifulSoup tree builder."""
        self.features = features

    def parse_file(self, file_path: Union[str, Path]) -> BeautifulSoup:
        """Parse HTML file into a document tree."""
        try:
            logger.info(f"Starting to parse file: {file_path}")
            if not is_html_file(file_path):
                logger.warning(f"File does not look like HTML: {file_path}")
            content = read_file_content(file_path)
            logger.debug(f"Successfully read file, content length: {len(content)}")
            return self.parse(content)

        except Exception as e:
            logger.error(f"Error parsing file {file_path}: {str(e)}", exc_info=True)
            raise

    def parse(self, html_content: str) -> BeautifulSoup:
        """Parse HTML content into a document tree."""
        try:
            logger.info("Starting HTML parsing")
            logger.debug(f"Input HTML content length: {len(html_content)}")
            # Keep attribute values as raw strings; bs4 would otherwise split
            # class, rel and friends on whitespace.
            soup = BeautifulSoup(html_content, self.features, multi_valued_attributes=None)
            logger.info("HTML parsing complete")
            return soup

        except Exception as e:
            logger.error(f"Error parsing HTML: {str(e)}", exc_info=True)
            raise

    def get_root(self, soup: BeautifulSoup):
        """Start with the body tag if it exists, otherwise use the document."""
        root = soup.body if soup.body else soup
        logger.debug(f"Using root element: {root.name}")
        return root
