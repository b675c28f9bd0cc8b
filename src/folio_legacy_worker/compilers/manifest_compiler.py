"""Manifest compiler for FutureFolio issue packages.

Builds the fixed-field manifest.xml the FutureFolio viewer reads. Apart
from the page count the document is identical for every issue, and its
bytes must stay stable across runs.
"""

import logging

from lxml import etree

from schemas.config import ManifestSettings

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.xml"


class ManifestCompiler:
    """Compile manifest.xml documents.

    Fields are written in this order: pageWidth, pageHeight, pages, tocMode,
    centreCoversInLandscape, portraitPageAlignmentMode, coverPageNumber,
    linkColour, linkBorderColour, linkBorderWidth, linkPadding,
    enableSpreadMode.
    """

    def __init__(self, settings: ManifestSettings | None = None):
        self.settings = settings or ManifestSettings()

    def compile(self, page_count: int) -> bytes:
        """Build manifest.xml for an issue.

        Args:
            page_count: Number of PDF pages in the issue

        Returns:
            The serialized document, UTF-8 encoded with an XML declaration
        """
        if page_count < 0:
            raise ValueError(f"page_count must not be negative: {page_count}")

        root = self._build_manifest(page_count)
        document = etree.tostring(
            root,
            xml_declaration=True,
            encoding="UTF-8",
            pretty_print=True,
        )
        logger.debug(f"Compiled {MANIFEST_NAME} for {page_count} pages")
        return document

    def _build_manifest(self, page_count: int) -> etree._Element:
        s = self.settings
        fields = [
            ("pageWidth", s.page_width),
            ("pageHeight", s.page_height),
            ("pages", page_count),
            ("tocMode", s.toc_mode),
            ("centreCoversInLandscape", s.centre_covers_in_landscape),
            ("portraitPageAlignmentMode", s.portrait_page_alignment_mode),
            ("coverPageNumber", s.cover_page_number),
            ("linkColour", s.link_colour),
            ("linkBorderColour", s.link_border_colour),
            ("linkBorderWidth", s.link_border_width),
            ("linkPadding", s.link_padding),
            ("enableSpreadMode", s.enable_spread_mode),
        ]

        root = etree.Element("manifest")
        for tag, value in fields:
            el = etree.SubElement(root, tag)
            el.text = str(value)
        return root
