"""
Content module for the combat odds engine.

Loads the animation -> hitsplat grouping lookup from JSON so that hit counts
can be resolved by animation id.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning

from combat_odds.combat.hitsplats import AnimationData, expected_hit_count
from combat_odds.core.logging import get_logger

logger = get_logger(__name__)


class AnimationRepository:
    """
    Registry of attack animations keyed by animation id.
    """

    animations: dict[int, AnimationData]

    def __init__(self, data_file: Path | None = None) -> None:
        """
        Initialize the AnimationRepository.

        Args:
            data_file (Path | None):
                A JSON file with animation data to load, if any.

        """
        self.animations = {}
        if data_file:
            self.reload(data_file)

    def reload(self, data_file: Path) -> None:
        """
        (Re)load all animations from disk, replacing the current entries.

        Args:
            data_file (Path):
                The JSON file containing a list of animations.
        """
        self.animations = _load_json_file(
            data_file,
            self._load_animations,
            "animations",
        )

    def register(self, animation: AnimationData) -> None:
        """Adds or replaces a single animation."""
        self.animations[animation.animation_id] = animation

    def get(self, animation_id: int) -> AnimationData | None:
        """Get an animation by id, or None if not found."""
        animation = self.animations.get(animation_id)
        if animation is None:
            log_warning(
                f"Animation '{animation_id}' not found in AnimationRepository.",
                {
                    "animation_id": animation_id,
                    "known_animations": len(self.animations),
                },
            )
        return animation

    def expected_hits(self, animation_id: int) -> int:
        """Expected hitsplats for an animation, one for unknown animations."""
        return expected_hit_count(self.get(animation_id))

    def __len__(self) -> int:
        return len(self.animations)

    def __contains__(self, animation_id: object) -> bool:
        return animation_id in self.animations

    @staticmethod
    def _load_animations(data: list[dict]) -> dict[int, AnimationData]:
        """
        Load animations from JSON data.

        Args:
            data (list[dict]): List of animation data dictionaries.

        Returns:
            dict[int, AnimationData]: Dictionary mapping ids to animations.

        Raises:
            ValueError: If invalid or duplicate animation data is encountered.

        """
        animations: dict[int, AnimationData] = {}
        for animation_data in data:
            if not isinstance(animation_data, dict):
                raise ValueError(f"Invalid animation data: {animation_data!r}")
            animation = AnimationData(**animation_data)
            if animation.animation_id in animations:
                raise ValueError(f"Duplicate animation id: {animation.animation_id}")
            animations[animation.animation_id] = animation
        return animations


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[Any, Any]],
    description: str,
) -> dict[Any, Any]:
    """Helper to load and validate JSON files"""
    try:
        logger.debug("Loading %s from %s using %s", description, filepath, loader_func.__name__)
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
