"""Framebuffer attachment formats and specifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from candle import log

MAX_FRAMEBUFFER_SIZE = 8192
MAX_COLOR_ATTACHMENTS = 4


class FramebufferTextureFormat(Enum):
    """Pixel format of a framebuffer attachment."""

    NONE = 0
    RGBA8 = 1
    RED_INTEGER = 2
    DEPTH24STENCIL8 = 3
    DEPTH = 3


def is_depth_format(texture_format: FramebufferTextureFormat) -> bool:
    """Whether ``texture_format`` is a depth/stencil format."""
    return FramebufferTextureFormat(texture_format) is FramebufferTextureFormat.DEPTH24STENCIL8


@dataclass(frozen=True)
class FramebufferTextureSpecification:
    """Description of one attachment texture."""

    texture_format: FramebufferTextureFormat = FramebufferTextureFormat.NONE

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "texture_format", FramebufferTextureFormat(self.texture_format)
        )


def _as_spec(item) -> FramebufferTextureSpecification:
    if isinstance(item, FramebufferTextureSpecification):
        return item
    return FramebufferTextureSpecification(FramebufferTextureFormat(item))


@dataclass
class FramebufferSpecification:
    """Size, attachments and sampling of a framebuffer."""

    width: int = 0
    height: int = 0
    attachments: list[FramebufferTextureSpecification] = field(default_factory=list)
    samples: int = 1
    swap_chain_target: bool = False

    def __post_init__(self) -> None:
        self.attachments = [_as_spec(item) for item in self.attachments]
        if len(self.color_attachments()) > MAX_COLOR_ATTACHMENTS:
            raise ValueError(
                f"at most {MAX_COLOR_ATTACHMENTS} color attachments are supported"
            )

    @property
    def multisampled(self) -> bool:
        return self.samples > 1

    def color_attachments(self) -> list[FramebufferTextureSpecification]:
        """Attachments that are not depth formats, in order."""
        return [spec for spec in self.attachments if not is_depth_format(spec.texture_format)]

    def depth_attachment(self) -> FramebufferTextureSpecification:
        """The last depth attachment, or one of format NONE if there is none."""
        depth = FramebufferTextureSpecification()
        for spec in self.attachments:
            if is_depth_format(spec.texture_format):
                depth = spec
        return depth

    def resize(self, width: int, height: int) -> bool:
        """Change the size; out-of-range sizes are ignored with a warning.

        Returns whether the size was changed.
        """
        if (
            width <= 0
            or height <= 0
            or width > MAX_FRAMEBUFFER_SIZE
            or height > MAX_FRAMEBUFFER_SIZE
        ):
            logger = log.core_logger()
            if logger is not None:
                logger.warning("Attempted to resize framebuffer to %s, %s", width, height)
            return False
        self.width = int(width)
        self.height = int(height)
        return True