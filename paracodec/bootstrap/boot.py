import logging

from paracodec.bootstrap.deps import get_config, get_unmarshal_processor
from paracodec.core.helpers.utils import setup_logging
from paracodec.core.processor.unmarshal import UnmarshalProcessor


def bootstrap() -> UnmarshalProcessor:
    """
    Configure logging, then build and start the unmarshal stage described
    by the configuration file. The caller stops it on shutdown.
    """
    config = get_config()
    setup_logging(config.logging.level)

    processor = get_unmarshal_processor()
    processor.start()
    logging.getLogger("paracodec.boot").info(
        f"{processor} started for pipeline '{config.pipeline.name}'"
    )
    return processor
