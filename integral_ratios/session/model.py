"""
Session state around one approximation engine.
"""

import logging
from typing import List, Optional

from ..config import ModelInput, SessionConfig, Settings
from ..engine import Algorithm
from ..errors import InvalidInput, UndefinedDomain
from ..parsing import algorithm_input_from_strings, parse_value
from ..types import Convergent, SessionObserver
from .state import decode_state, encode_state

LOG = logging.getLogger(__name__)


class Session:
    """
    Typed input, settings and computed convergents of one approximation.

    Every mutation is pushed into the engine and announced to the
    registered observers synchronously, in registration order.
    """

    def __init__(
        self,
        algorithm: Optional[Algorithm] = None,
        config: Optional[SessionConfig] = None
    ):
        """
        Initialize a session with default input and settings.

        Args:
            algorithm: Engine to drive; a new one is created if None
            config: Session behaviour; SessionConfig() if None
        """
        self.config = config if config is not None else SessionConfig()
        self.default_input = ModelInput()
        self.default_settings = Settings()

        self._algorithm = algorithm if algorithm is not None else Algorithm()
        self._observers: List[SessionObserver] = []

        self._model_input = self.default_input.model_copy(deep=True)
        self._settings = self.default_settings.model_copy(deep=True)
        self._values: List[float] = []

        self._finished = False
        self._ratio_outputs: List[Convergent] = []
        self._ratio_scalars: List[float] = []
        self._pivots: List[int] = []

        self._set_algorithm_input()

    # Observers

    def add_observer(self, observer: SessionObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: SessionObserver) -> None:
        self._observers = [obs for obs in self._observers if obs is not observer]

    def _notify_inputs_changed(self) -> None:
        for observer in self._observers:
            observer.on_inputs_changed()

    def _notify_settings_changed(self) -> None:
        for observer in self._observers:
            observer.on_settings_changed()

    # Computation

    def restart(self) -> None:
        """Drop computed results and recompute the first lines."""
        LOG.info("Restarting session")
        self._ratio_outputs = []
        self._ratio_scalars = []
        self._pivots = []
        self._finished = False
        self._algorithm.reset()

        for observer in self._observers:
            observer.on_finished(False)

        if self.length < self.config.autocompute_limit:
            self.compute_lines(self.config.initial_lines)

    def compute_lines(self, count: int) -> None:
        """
        Compute up to `count` further convergents.

        Args:
            count: Number of engine steps to attempt
        """
        for _ in range(count):
            self._compute_step()
        for observer in self._observers:
            observer.on_data_changed()

    def _compute_step(self) -> None:
        if self._finished:
            return
        result = self._algorithm.step()
        if result is None:
            LOG.info("Converged with %d convergents", len(self._ratio_outputs))
            self._set_finished(True)
            return
        self._ratio_outputs.append(result)
        self._ratio_scalars.append(self._algorithm.ratio_factor())
        self._pivots.append(self._algorithm.current_pivot())

    def _set_finished(self, finished: bool) -> None:
        notify = self._finished != finished
        self._finished = finished
        if notify:
            for observer in self._observers:
                observer.on_data_changed()
                observer.on_finished(finished)

    # Inputs

    def _set_algorithm_input(self) -> None:
        algorithm_input = algorithm_input_from_strings(
            self._model_input.value_strings,
            self._model_input.mask
        )
        self._algorithm.set_input(algorithm_input)
        self._values = list(algorithm_input.ratio)
        LOG.debug("Set algorithm input to %s", algorithm_input.model_dump_json())

    def _apply_input(self, model_input: ModelInput) -> None:
        # Engine first, so a rejected input leaves the session unchanged
        previous = self._model_input
        self._model_input = model_input
        try:
            self._set_algorithm_input()
        except (InvalidInput, UndefinedDomain):
            self._model_input = previous
            raise

    def reset(self) -> None:
        """Restore default input and settings."""
        self._model_input = self.default_input.model_copy(deep=True)
        self._settings = self.default_settings.model_copy(deep=True)
        self._set_algorithm_input()

        for observer in self._observers:
            observer.on_inputs_changed()
            observer.on_settings_changed()

        self.restart()

    def set_input(self, model_input: ModelInput) -> None:
        self._apply_input(model_input.model_copy(deep=True))
        self._notify_inputs_changed()
        self.restart()

    def set_input_raw(self, value_strings: List[str], mask: List[bool]) -> None:
        self.set_input(ModelInput(value_strings=list(value_strings), mask=list(mask)))

    def set_value_from_string(self, i: int, value_string: str) -> None:
        """
        Replace one typed value.

        Args:
            i: Dimension index
            value_string: New decimal string

        Raises:
            InvalidInput: If the string is not a number
        """
        parse_value(value_string)
        model_input = self._model_input.model_copy(deep=True)
        model_input.value_strings[i] = value_string
        self.set_input(model_input)

    def set_mask_value(self, i: int, value: bool) -> None:
        model_input = self._model_input.model_copy(deep=True)
        model_input.mask[i] = value
        self.set_input(model_input)

    def set_length(self, length: int) -> None:
        """
        Grow or shrink the number of dimensions.

        New dimensions get the default value and are enabled.

        Args:
            length: New number of dimensions, at least 2
        """
        if length < 2:
            raise InvalidInput(f"At least 2 dimensions are required, got {length}")

        value_strings = list(self._model_input.value_strings[:length])
        mask = list(self._model_input.mask[:length])
        while len(value_strings) < length:
            value_strings.append(self.config.default_value)
            mask.append(True)

        self.set_input(ModelInput(value_strings=value_strings, mask=mask))

    # Settings

    def set_output_precision(self, precision: int) -> None:
        self._settings = Settings(output_precision=precision, show_pivot=self._settings.show_pivot)
        self._notify_settings_changed()

    def set_show_pivot(self, show_pivot: bool) -> None:
        self._settings = Settings(output_precision=self._settings.output_precision, show_pivot=show_pivot)
        self._notify_settings_changed()

    # Serialization

    def serialize_state(self) -> str:
        return encode_state(
            self._model_input,
            self._settings,
            self.config.state_version,
            self.default_input,
            self.default_settings,
        )

    def deserialize_state(self, encoded: str) -> bool:
        """
        Replace input and settings from an encoded state.

        Args:
            encoded: String from serialize_state

        Returns:
            False if the state was written by another format version

        Raises:
            StateDecodeError: If the string cannot be decoded, holds
                non-positive values, or its values and mask (after filling in
                defaults) differ in length or have fewer than 2 entries
        """
        payload = decode_state(encoded)
        if payload.version != self.config.state_version:
            LOG.error(
                "Version mismatch: expected %s, got %s",
                self.config.state_version, payload.version
            )
            return False

        self._apply_input(payload.to_model_input(self.default_input))
        if payload.settings is not None:
            self._settings = payload.settings

        for observer in self._observers:
            observer.on_settings_changed()
            observer.on_inputs_changed()

        LOG.debug("Deserialized state: %s", payload.model_dump_json())
        self.restart()
        return True

    # Results

    @property
    def algorithm(self) -> Algorithm:
        return self._algorithm

    @property
    def model_input(self) -> ModelInput:
        return self._model_input.model_copy(deep=True)

    @property
    def settings(self) -> Settings:
        return self._settings.model_copy()

    @property
    def length(self) -> int:
        return len(self._model_input.value_strings)

    @property
    def value_strings(self) -> List[str]:
        return list(self._model_input.value_strings)

    @property
    def values(self) -> List[float]:
        return list(self._values)

    @property
    def mask(self) -> List[bool]:
        return list(self._model_input.mask)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def ratio_outputs(self) -> List[Convergent]:
        return [list(r) for r in self._ratio_outputs]

    @property
    def ratio_scalars(self) -> List[float]:
        return list(self._ratio_scalars)

    @property
    def pivots(self) -> List[int]:
        return list(self._pivots)

    def ratio_scalar(self, i: int) -> float:
        return self._ratio_scalars[i]

    def pivot(self, i: int) -> int:
        return self._pivots[i]
