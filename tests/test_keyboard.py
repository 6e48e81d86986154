from glasstty.keyboard import KEYMAP_BOTH, KEYMAP_UPPER, Keyboard


def make(keymap=KEYMAP_BOTH):
    sent = []
    toggles = []
    kb = Keyboard(keymap, sent.append, lambda: toggles.append(True))
    return kb, sent, toggles


def test_plain_letter_both_cases():
    kb, sent, _ = make()
    assert kb.key_down("a") == b"a"
    assert sent == [b"a"]


def test_upper_keymap_letter():
    kb, sent, _ = make(KEYMAP_UPPER)
    kb.key_down("q")
    assert sent == [b"Q"]


def test_shift_selects_second_character():
    kb, sent, _ = make()
    kb.key_down("lshift")
    kb.key_down("1")
    kb.key_up("lshift")
    kb.key_down("1")
    assert sent == [b"!", b"1"]


def test_ctrl_masks_to_control_code():
    kb, sent, _ = make()
    kb.key_down("lctrl")
    kb.key_down("c")
    assert sent == [b"\x03"]


def test_capslock_acts_as_ctrl():
    kb, sent, _ = make()
    kb.key_down("capslock")
    kb.key_down("g")
    kb.key_up("capslock")
    kb.key_down("g")
    assert sent == [b"\x07", b"g"]


def test_alt_prefixes_escape():
    kb, sent, _ = make()
    kb.key_down("ralt")
    kb.key_down("x")
    kb.key_up("ralt")
    kb.key_down("x")
    assert sent == [b"\x1bx", b"x"]


def test_gui_suppresses_keys():
    kb, sent, _ = make()
    kb.key_down("lgui")
    assert kb.key_down("a") is None
    kb.key_up("lgui")
    kb.key_down("a")
    assert sent == [b"a"]


def test_f11_toggles_fullscreen_once():
    kb, sent, toggles = make()
    kb.key_down("f11")
    kb.key_down("f11", True)
    assert toggles == [True]
    assert sent == []


def test_unknown_key_sends_nothing():
    kb, sent, _ = make()
    assert kb.key_down("keypad5") is None
    assert kb.key_down(None) is None
    assert sent == []


def test_special_keys():
    kb, sent, _ = make()
    for key in ("return", "backspace", "delete", "tab", "escape"):
        kb.key_down(key)
    assert sent == [b"\r", b"\b", b"\x7f", b"\t", b"\x1b"]


def test_keymap_is_copied():
    kb, sent, _ = make(KEYMAP_UPPER)
    kb.keymap["backspace"] = "\x7f\x7f"
    kb.key_down("backspace")
    assert sent == [b"\x7f"]
    assert KEYMAP_UPPER["backspace"] == "\b\b"


def test_upper_grave_is_escape():
    upper, upper_sent, _ = make(KEYMAP_UPPER)
    upper.key_down("grave")
    upper.key_down("lshift")
    upper.key_down("grave")
    assert upper_sent == [b"\x1b", b"\x1b"]

    both, both_sent, _ = make(KEYMAP_BOTH)
    both.key_down("grave")
    both.key_down("lshift")
    both.key_down("grave")
    assert both_sent == [b"`", b"~"]