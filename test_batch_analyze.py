"""배치 분석 스크립트 테스트"""

import json

import pytest

from conftest import harmonious_face_points
from facial_harmony import batch_analyze
from facial_harmony.utils.exceptions import InvalidInputError


def _write(path, data):
    path.write_text(json.dumps(data), encoding='utf-8')
    return path


@pytest.fixture
def landmark_dir(tmp_path):
    directory = tmp_path / "landmarks"
    directory.mkdir()
    points = harmonious_face_points()
    _write(directory / "a_mapping.json", {"landmarks": {str(i): list(p) for i, p in points.items()}})

    as_list = [[0.0, 0.0]] * 468
    for index, point in points.items():
        as_list[index] = list(point)
    _write(directory / "b_list.json", {"landmarks": as_list})
    return directory


def test_load_landmark_file_formats(landmark_dir, tmp_path):
    mapping = batch_analyze.load_landmark_file(landmark_dir / "a_mapping.json")
    assert mapping["152"] == list(harmonious_face_points()[152])

    bare = _write(tmp_path / "bare.json", [[1, 2], [3, 4]])
    assert batch_analyze.load_landmark_file(bare) == [[1, 2], [3, 4]]

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding='utf-8')
    with pytest.raises(InvalidInputError):
        batch_analyze.load_landmark_file(broken)

    no_key = _write(tmp_path / "no_key.json", {"points": []})
    with pytest.raises(InvalidInputError):
        batch_analyze.load_landmark_file(no_key)

    not_utf8 = tmp_path / "not_utf8.json"
    not_utf8.write_bytes(b'\xff\xfe\x00garbage')
    with pytest.raises(InvalidInputError):
        batch_analyze.load_landmark_file(not_utf8)

    with pytest.raises(InvalidInputError):
        batch_analyze.load_landmark_file(tmp_path / "missing.json")


def test_parse_weight_overrides():
    assert batch_analyze.parse_weight_overrides(["symmetry=10", "eyeGap = 2.5"]) == {
        'symmetry': 10.0, 'eyeGap': 2.5}
    assert batch_analyze.parse_weight_overrides(None) == {}


def test_main_writes_results(landmark_dir, tmp_path, capsys):
    output = tmp_path / "out" / "results.json"
    exit_code = batch_analyze.main(["--directory", str(landmark_dir), "--output", str(output)])

    assert exit_code == 0
    results = json.loads(output.read_text(encoding='utf-8'))
    assert [r['filename'] for r in results] == ["a_mapping.json", "b_list.json"]
    for r in results:
        assert r['success']
        assert r['analysis']['overall'] == pytest.approx(100.0)
        assert set(r['analysis']['metrics']) == {'symmetry', 'proportion', 'fifths', 'eye_gap'}

    assert "분석 결과 요약" in capsys.readouterr().out


def test_main_reports_failures(landmark_dir, tmp_path):
    (landmark_dir / "c_broken.json").write_text("[", encoding='utf-8')
    _write(landmark_dir / "d_partial.json", {"landmarks": {"33": [170, 220]}})
    output = tmp_path / "results.json"

    exit_code = batch_analyze.main(["--directory", str(landmark_dir), "--output", str(output)])

    assert exit_code == 1
    results = {r['filename']: r for r in json.loads(output.read_text(encoding='utf-8'))}
    assert results["a_mapping.json"]['success']
    assert not results["c_broken.json"]['success']
    assert not results["d_partial.json"]['success']


def test_main_applies_weight_overrides(landmark_dir, tmp_path):
    output = tmp_path / "results.json"
    batch_analyze.main([
        "--directory", str(landmark_dir), "--output", str(output),
        "--weight", "proportion=0", "--weight", "eyeGap=1",
    ])
    results = json.loads(output.read_text(encoding='utf-8'))
    assert results[0]['analysis']['weights']['proportion'] == 0.0
    assert results[0]['analysis']['weights']['eye_gap'] == 1.0


@pytest.mark.parametrize("bad", ["symmetry", "symmetry=lots", "fifths=-1"])
def test_main_rejects_bad_weights(landmark_dir, tmp_path, bad):
    with pytest.raises(SystemExit):
        batch_analyze.main([
            "--directory", str(landmark_dir), "--output", str(tmp_path / "r.json"), "--weight", bad,
        ])


def test_main_skips_unreadable_files_in_file_order(landmark_dir, tmp_path):
    (landmark_dir / "a0_binary.json").write_bytes(b'\xff\xfe\x00garbage')
    (landmark_dir / "a1_folder.json").mkdir()
    (landmark_dir / "c_broken.json").write_text("[", encoding='utf-8')
    output = tmp_path / "results.json"

    exit_code = batch_analyze.main(["--directory", str(landmark_dir), "--output", str(output)])

    assert exit_code == 1
    results = json.loads(output.read_text(encoding='utf-8'))
    assert [r['filename'] for r in results] == [
        "a0_binary.json", "a1_folder.json", "a_mapping.json", "b_list.json", "c_broken.json"]
    assert [r['success'] for r in results] == [False, False, True, True, False]


def test_config_help_mentions_logging_source(capsys):
    with pytest.raises(SystemExit):
        batch_analyze.main(["--help"])
    assert "FACIAL_HARMONY_CONFIG_PATH" in capsys.readouterr().out
