from __future__ import annotations

import logging
from dataclasses import replace

from .generation import generate_client
from .generation.client import ClientOutput
from .loader import DescriptorSource, load_service

logger = logging.getLogger(__name__)


def generate_source(source: DescriptorSource, **overrides: object) -> ClientOutput:
    """Load a descriptor document and generate the client module it describes.

    Keyword overrides replace options of the document's profile; ``None``
    values are ignored.
    """
    document = load_service(source)
    profile = document.profile
    options = {key: value for key, value in overrides.items() if value is not None}
    if options:
        logger.debug("Overriding profile options: %s", ", ".join(sorted(options)))
        profile = replace(profile, **options)  # type: ignore[arg-type]
    return generate_client(document.service, profile)
