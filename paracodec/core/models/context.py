from dataclasses import dataclass


@dataclass
class PipelineContext:
    """
    Ambient execution context of the pipeline hosting the stages.

    Context-aware data formats receive it once, right before they are
    started, and may read their runtime limits from it.
    """
    name: str = "default"
    """
    Name of the pipeline, used in logs and diagnostics.
    """

    max_message_size: int = 1 * 1024 * 1024  # 1MB
    """
    Maximum number of bytes a data format may read from a single body.
    0 disables the limit.
    """

    charset: str = "utf-8"
    """
    Default charset used when a textual body has to be turned into bytes.
    """
