"""Field-name configuration for the note helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NoteSchema:
    """Names of the fields the validation and extraction helpers read."""

    title: str = "title"
    video_image: str = "video_img"
    performers: str = "performers"
    performer_name: str = "name"
    performer_image: str = "image"


DEFAULT_SCHEMA = NoteSchema()
