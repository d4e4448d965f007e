import uuid
from dataclasses import dataclass, field
from typing import Any, BinaryIO

from paracodec.core.helpers.convert import to_input_stream


@dataclass(eq=False)
class Message:
    """
    A message flowing through the pipeline: metadata plus a single body.

    Messages compare by identity, a stage replacing the out-message of an
    exchange must be observable as such.
    """
    body: Any = None
    """
    Payload of dynamic type: raw bytes before unmarshalling, the decoded
    application object afterwards.
    """

    headers: dict[str, Any] = field(default_factory=dict)
    attachments: dict[str, Any] = field(default_factory=dict)
    message_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def copy_from(self, other: "Message") -> None:
        """
        Replace the identity and metadata of this message with the ones of
        `other`. The body is left untouched.
        """
        self.message_id = other.message_id
        self.headers = dict(other.headers)
        self.attachments = dict(other.attachments)

    def get_mandatory_body(self, charset: str = "utf-8") -> BinaryIO:
        """
        Return the body as a readable binary stream or raise BodyTypeError.
        """
        return to_input_stream(self.body, charset=charset)
