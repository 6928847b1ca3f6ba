import pytest
from typing import Callable, List

from integral_ratios import Algorithm, AlgorithmInput


def _run(algorithm_input: AlgorithmInput) -> List[List[int]]:
    algorithm = Algorithm(algorithm_input)
    return list(algorithm.run())


@pytest.fixture
def run_input() -> Callable[[AlgorithmInput], List[List[int]]]:
    """Provide a helper collecting every convergent of an input."""
    return _run


@pytest.fixture
def pi_input() -> AlgorithmInput:
    return AlgorithmInput(ratio=[3.14159, 1.0], mask=[True, True], precision=[5e-6, 5e-16])


@pytest.fixture
def golden_input() -> AlgorithmInput:
    return AlgorithmInput(ratio=[1.61803398, 1.0], mask=[True, True], precision=[5e-8, 5e-8])


@pytest.fixture
def oil_input() -> AlgorithmInput:
    return AlgorithmInput(
        ratio=[85.47, 72.65, 21.37],
        mask=[True, True, True],
        precision=[5e-3, 5e-3, 5e-3]
    )


@pytest.fixture
def four_d_input() -> AlgorithmInput:
    return AlgorithmInput(
        ratio=[20.0, 7.0, 17.0, 21.4],
        mask=[True, True, True, True],
        precision=[5e-8, 5e-8, 5e-8, 5e-15]
    )


@pytest.fixture(params=["pi", "golden", "oil", "four_d", "masked"])
def any_input(request: pytest.FixtureRequest) -> AlgorithmInput:
    """Provide each reference input in turn."""
    if request.param == "masked":
        return AlgorithmInput(
            ratio=[3.14159, 1.0, 2.5],
            mask=[True, True, False],
            precision=[5e-6, 5e-16, 5e-6]
        )
    return request.getfixturevalue(f"{request.param}_input")


class RecordingObserver:
    """Session observer that records notifications in order."""

    def __init__(self):
        self.events: List[str] = []

    def on_inputs_changed(self) -> None:
        self.events.append("inputs")

    def on_finished(self, finished: bool) -> None:
        self.events.append(f"finished:{finished}")

    def on_settings_changed(self) -> None:
        self.events.append("settings")

    def on_data_changed(self) -> None:
        self.events.append("data")


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()
