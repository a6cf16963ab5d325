from buildstore.catalog import MODES_SHORT, alt_weapon_id


def test_alt_id_both_directions():
    assert alt_weapon_id(40) == 45
    assert alt_weapon_id(45) == 40


def test_no_alt_id():
    assert alt_weapon_id(1200) is None


def test_mode_order():
    assert MODES_SHORT[0] == "TW"
    assert len(set(MODES_SHORT)) == len(MODES_SHORT)
