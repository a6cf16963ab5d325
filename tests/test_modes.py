from buildstore.modes import decode_modes, encode_modes


def test_same_set_same_serialization():
    assert encode_modes(["RM", "SZ"]) == encode_modes(["SZ", "RM"]) == '["SZ","RM"]'


def test_follows_global_mode_order():
    assert decode_modes(encode_modes(["CB", "TW", "TC"])) == ["TW", "TC", "CB"]


def test_repeated_mode_collapsed():
    assert encode_modes(["SZ", "SZ", "TW"]) == '["TW","SZ"]'


def test_empty_or_missing_is_no_restriction():
    assert encode_modes(None) is None
    assert encode_modes([]) is None
    assert decode_modes(None) is None
