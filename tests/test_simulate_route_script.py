from scripts.simulate_route import trajectory_to_frame
from simulation.resampler import resample


def test_trajectory_to_frame_has_one_row_per_step(equator_path):
    result = resample(equator_path, speed_mps=10)

    frame = trajectory_to_frame(result)

    assert list(frame.columns) == ["lat", "lng", "timestamp"]
    assert len(frame) == len(result.steps)
    assert frame["timestamp"].tolist() == [step.timestamp_ms for step in result.steps]
    assert frame.iloc[-1]["lng"] == 0.001
