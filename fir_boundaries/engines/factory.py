from typing import Dict, List, Type, Union

from .base import Mode, ModeEngine


class EngineFactory:
    """Factory for creating mode engines."""

    _engines: Dict[Mode, Type[ModeEngine]] = {}

    @classmethod
    def register_engine(cls, mode: Mode, engine_class: Type[ModeEngine]) -> None:
        """
        Register an engine for a mode.

        Args:
            mode: Mode handled by the engine
            engine_class: Engine class to register
        """
        cls._engines[mode] = engine_class

    @classmethod
    def get_engine(cls, mode: Union[Mode, str]) -> ModeEngine:
        """
        Get an engine for a mode.

        Args:
            mode: Mode or its name ('strict', 'fix')

        Returns:
            ModeEngine instance

        Raises:
            ValueError: If the mode is unknown or has no registered engine
        """
        mode = Mode(mode)
        engine_class = cls._engines.get(mode)
        if engine_class is None:
            raise ValueError(f"No engine registered for mode: {mode.value}")
        return engine_class()

    @classmethod
    def get_supported_modes(cls) -> List[Mode]:
        return list(cls._engines.keys())
