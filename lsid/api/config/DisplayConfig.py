"""Display configuration."""

from pydantic import BaseModel, ConfigDict, Field


class DisplayConfig(BaseModel):
    """Which columns to print and whether to walk subtrees.

    Built once before any listing starts; frozen afterwards.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    recursive: bool = Field(False, description="Walk the whole subtree")
    show_symlink: bool = Field(False, description="Print symlink targets")
    show_mode: bool = Field(False, description="Print permission bits")
    show_owner: bool = Field(False, description="Print numeric uid/gid")
    show_size: bool = Field(False, description="Print byte size")
    show_time: bool = Field(False, description="Print modification time")
    show_cid: bool = Field(False, description="Print content identifier of regular files")
