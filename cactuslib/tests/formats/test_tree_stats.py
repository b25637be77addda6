import io
import math
import pytest

from cactuslib import RelativeEntropyReport
from cactuslib.formats.tree_stats import HEADER, TreeStatsRecord, decode, encode

def _rec():
    p = 24.0 + 10 * math.log2(10)
    q = 10 * math.log2(10)
    return TreeStatsRecord.from_report("root", RelativeEntropyReport(p, q, p - q))

def test_encode_text_layout():
    txt = encode([_rec()], sink=None)
    lines = txt.splitlines()
    assert lines[0] == HEADER
    cols = lines[1].split("\t")
    assert cols[0] == "root"
    assert float(cols[1]) == 24.0 + 10 * math.log2(10)

def test_decode_keeps_exact_floats():
    rec = _rec()
    (back,) = list(decode(encode([rec])))
    assert back == rec

def test_encode_to_filelike_and_path(tmp_path):
    buf = io.StringIO()
    encode([_rec()], sink=buf)
    assert "root" in buf.getvalue()
    p = tmp_path / "stats.tsv"
    encode([_rec()], sink=str(p))
    assert list(decode(str(p)))[0].net_name == "root"

def test_bad_inputs():
    with pytest.raises(TypeError):
        encode([{"net_name": "x"}])
    with pytest.raises(TypeError):
        encode([_rec()], sink=42)
    with pytest.raises(ValueError):
        list(decode("root\t1.0\t2.0\n"))

@pytest.mark.parametrize("name", ["a\tb", "a\nb", "a\r", "#root"])
def test_unwritable_net_names_are_rejected(name, tmp_path):
    rec = TreeStatsRecord(name, 1.0, 1.0, 0.0)
    with pytest.raises(ValueError, match="net name"):
        encode([rec])
    p = tmp_path / "stats.tsv"
    with pytest.raises(ValueError):
        encode([rec], sink=str(p))
    assert not p.exists()

def test_sink_is_keyword_only():
    with pytest.raises(TypeError):
        encode([_rec()], io.StringIO())
