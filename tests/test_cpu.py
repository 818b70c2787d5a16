from barstatus.components.cpu import CpuUsage, cpu_freq


def _write(path, user, system, idle):
    path.write_text(
        f"cpu  {user} 0 {system} {idle} 0 0 0 0 0 0\n"
        "cpu0 1 2 3 4 5 6 7 8 9 10\n"
    )


def test_first_sample_gives_none(tmp_path):
    stat = tmp_path / "stat"
    _write(stat, 100, 100, 800)
    assert CpuUsage(str(stat)).perc() is None


def test_usage_between_samples(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    _write(stat, 100, 100, 800)
    usage.perc()
    _write(stat, 200, 200, 1600)
    assert usage.perc() == "20"


def test_usage_stays_within_bounds(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    samples = [(10, 5, 100), (50, 20, 130), (400, 90, 131), (401, 91, 900)]
    results = []
    for user, system, idle in samples:
        _write(stat, user, system, idle)
        results.append(usage.perc())
    assert results[0] is None
    assert all(0 <= int(value) <= 100 for value in results[1:])


def test_unchanged_counters_give_none(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    _write(stat, 100, 100, 800)
    usage.perc()
    assert usage.perc() is None


def test_missing_stat_file(tmp_path):
    assert CpuUsage(str(tmp_path / "absent")).perc() is None


def test_short_stat_line(tmp_path):
    stat = tmp_path / "stat"
    usage = CpuUsage(str(stat))
    _write(stat, 100, 100, 800)
    usage.perc()
    stat.write_text("cpu 1 2 3\n")
    assert usage.perc() is None


def test_cpu_freq_scales_khz(tmp_path):
    freq = tmp_path / "scaling_cur_freq"
    freq.write_text("1800000\n")
    assert cpu_freq(str(freq)) == "1.8 G"


def test_cpu_freq_missing_file(tmp_path):
    assert cpu_freq(str(tmp_path / "absent")) is None