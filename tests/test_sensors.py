from barstatus.components.sensors import temp, vol_perc


def test_temp_converts_millidegrees(tmp_path):
    sensor = tmp_path / "temp1_input"
    sensor.write_text("45000\n")
    assert temp(str(sensor)) == "45"


def test_temp_truncates_fraction(tmp_path):
    sensor = tmp_path / "temp1_input"
    sensor.write_text("999\n")
    assert temp(str(sensor)) == "0"


def test_temp_missing_file(tmp_path):
    assert temp(str(tmp_path / "absent")) is None


def test_temp_garbage(tmp_path):
    sensor = tmp_path / "temp1_input"
    sensor.write_text("hot\n")
    assert temp(str(sensor)) is None


def test_vol_perc_missing_device(tmp_path):
    assert vol_perc(str(tmp_path / "mixer")) is None


def test_vol_perc_regular_file_is_not_a_mixer(tmp_path):
    fake = tmp_path / "mixer"
    fake.write_bytes(b"\0" * 8)
    assert vol_perc(str(fake)) is None