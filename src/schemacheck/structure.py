"""JSON-LD parsing and structural (@context / @type / @id) validation."""

import json
import logging
from typing import Optional

from schemacheck.constants import STANDARD_CONTEXT
from schemacheck.document import JsonLdDocument
from schemacheck.models import FindingCollector

logger = logging.getLogger(__name__)


def parse_document(raw_text: str, findings: FindingCollector) -> Optional[JsonLdDocument]:
    """Parse JSON-LD text.

    On failure a single "Invalid JSON syntax" error is recorded and None is
    returned; the caller must not run any further checks.
    """
    try:
        data = json.loads(raw_text)
    except (ValueError, TypeError, RecursionError) as e:
        logger.debug(f"JSON-LD parse failed: {str(e)[:100]}")
        findings.error(
            "Invalid JSON syntax",
            suggestion="Check for missing commas, brackets, or quotes",
        )
        return None

    return JsonLdDocument(data)


class StructureValidator:
    """Checks the JSON-LD keywords every document needs."""

    def validate(self, document: JsonLdDocument, findings: FindingCollector) -> None:
        context = document.get("@context")
        if not document.has("@context"):
            findings.error(
                "Missing @context property",
                suggestion='Add "@context": "https://schema.org" to your schema',
            )
        elif context != STANDARD_CONTEXT:
            findings.warning(
                "Non-standard @context value",
                suggestion='Consider using "https://schema.org" for better compatibility',
            )

        if not document.has("@type"):
            findings.error(
                "Missing @type property",
                suggestion='Add "@type" property to specify the schema type',
            )

        if not document.has("@id"):
            findings.warning(
                "Missing @id property",
                suggestion='Consider adding "@id" for better entity identification',
            )
