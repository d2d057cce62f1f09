# Tests for the Punycode entry points.

import random

import pytest

from rfc3492 import DecodeError, EncodeError, InvalidBasicCodePoint, \
     InvalidCodePoint, InvalidDigit, Overflow, PunycodeError, \
     UnexpectedEnd, decode, encode, from_punycode, maxint, rfc3492, \
     to_punycode
from rfc3492.bootstring import bootstring_encode_integer
from rfc3492.samples import rfc_russian, samples

ids = [s[0] for s in samples]


@pytest.mark.parametrize("label, u, p", samples, ids=ids)
def test_encode_sample(label, u, p):
    assert encode(u) == p.encode("ascii")


@pytest.mark.parametrize("label, u, p", samples, ids=ids)
def test_decode_sample(label, u, p):
    assert decode(p) == u
    assert decode(p.encode("ascii")) == u


def test_u_umlaut():
    assert encode([0x00FC]) == b"tda"
    assert decode(b"tda") == [0x00FC]


def test_buecher():
    assert encode("bücher") == b"bcher-kva"
    assert from_punycode("bcher-kva") == "bücher"


def test_empty():
    assert encode([]) == b""
    assert encode("") == b""
    assert decode(b"") == []


def test_pure_ascii_is_copied():
    assert encode("abc") == b"abc-"
    assert decode(b"abc-") == [ord(c) for c in "abc"]
    assert from_punycode(to_punycode("a-b-c")) == "a-b-c"


def test_str_and_code_points_encode_alike():
    assert encode("ü") == encode([0xFC])
    assert encode("3年B組金八先生") == b"3B-ww4c5e180e575a65lsy2b"


def test_decode_accepts_bytearray():
    assert decode(bytearray(b"tda")) == [0xFC]


def test_last_delimiter_separates_basic_part():
    u = [ord(c) for c in "Hello-Another-Way-"] + \
        [0x305D, 0x308C, 0x305E, 0x308C, 0x306E, 0x5834, 0x6240]
    assert decode("Hello-Another-Way--fc4qua05auwb3674vfr0b") == u


def test_decode_digits_are_case_insensitive():
    assert decode("TDA") == decode("tda")
    assert decode("bcher-KVA") == decode("bcher-kva")
    russian = [u for label, u, p in samples if label.startswith("(I)")][0]
    assert decode(rfc_russian) == russian
    assert decode(rfc_russian.upper()) == russian


def test_basic_part_keeps_its_case():
    assert from_punycode("BCHER-kva") == "BüCHER"


@pytest.mark.parametrize("label, u, p", samples, ids=ids)
def test_encoder_alphabet(label, u, p):
    out = encode(u)
    b = len([c for c in u if c < 0x80])
    if b > 0:
        assert out[b:b+1] == b"-"
        out = out[b+1:]
    allowed = b"abcdefghijklmnopqrstuvwxyz0123456789"
    assert all(c in allowed for c in out)


def test_round_trip_random_labels():
    rng = random.Random(3492)
    pools = [
        list(range(0x20, 0x7F)),
        list(range(0xA0, 0x180)),
        list(range(0x3040, 0x30FF)),
        list(range(0x4E00, 0x4F00)),
        [0x1F600, 0x1F60E, 0x10FFFF, 0xE000, 0xFFFD],
    ]
    for count in range(300):
        pool = rng.choice(pools[1:])
        s = [rng.choice(rng.choice([pools[0], pool]))
             for j in range(rng.randint(1, 40))]
        s.append(rng.choice(pool))
        rng.shuffle(s)
        out = encode(s)
        assert decode(out) == s
        b = len([c for c in s if c < 0x80])
        if b > 0:
            assert out[b:b+1] == b"-"
            out = out[b+1:]
        assert all(c in b"abcdefghijklmnopqrstuvwxyz0123456789" for c in out)


def test_deterministic():
    s = "háčkyčárky"
    assert encode(s) == encode(s)
    assert from_punycode(to_punycode(s)) == s


def test_encode_rejects_non_scalar_values():
    for bad in ([0xD800], [0xDFFF], [0x110000], [-1]):
        with pytest.raises(InvalidCodePoint):
            encode(bad)
    with pytest.raises(InvalidCodePoint) as ei:
        encode("a\ud800")
    assert ei.value.position == 1
    with pytest.raises(InvalidCodePoint):
        encode([0x61, "b"])
    with pytest.raises(InvalidCodePoint) as ei:
        encode([True, 0xFC])
    assert ei.value.position == 0


def test_encode_overflow():
    # (0x10FFFF - 0x80) * 4001 doesn't fit in 32 bits.
    with pytest.raises(Overflow):
        encode([0x61] * 4000 + [0x10FFFF])


def test_encode_near_overflow_round_trips():
    s = [0x61] * 3000 + [0x10FFFF]
    assert decode(encode(s)) == s


def test_encode_overflow_stepping_past_basic_code_points():
    # The jump to m fits with 1822 to spare, but there are 4000
    # basic code points to step past afterwards.
    with pytest.raises(Overflow):
        encode([0x61] * 4000 + [0x80 + maxint // 4001])


def test_encode_largest_delta_round_trips():
    # Jump plus steps comes to maxint - 1823.
    s = [0x61] * 4000 + [0x80 + (maxint - 4000) // 4001]
    assert decode(encode(s)) == s


def test_decode_overflow():
    with pytest.raises(Overflow):
        decode("9" * 20)


def test_decode_code_point_out_of_range():
    for cp in (0x110000, 0xD800, 0xDFFF):
        p = bootstring_encode_integer(rfc3492, cp - 0x80, 72)
        with pytest.raises(InvalidCodePoint):
            decode(p)
    p = bootstring_encode_integer(rfc3492, 0x10FFFF - 0x80, 72)
    assert decode(p) == [0x10FFFF]


def test_decode_huge_delta_is_overflow_not_wrapped():
    p = bootstring_encode_integer(rfc3492, maxint + 1, 72)
    with pytest.raises(Overflow):
        decode(p)


def test_decode_invalid_digit():
    with pytest.raises(InvalidDigit) as ei:
        decode("a-b- x")
    assert ei.value.position == 4
    with pytest.raises(InvalidDigit):
        decode("tda!")
    with pytest.raises(InvalidDigit):
        decode(b"bcher-kv\xe9")


def test_decode_invalid_basic_code_point():
    with pytest.raises(InvalidBasicCodePoint) as ei:
        decode(b"\xe9-tda")
    assert ei.value.position == 0
    with pytest.raises(InvalidBasicCodePoint) as ei:
        decode("abcé-tda")
    assert ei.value.position == 3


def test_decode_unexpected_end():
    with pytest.raises(UnexpectedEnd):
        decode("td")
    with pytest.raises(UnexpectedEnd) as ei:
        decode("b")
    assert ei.value.position == 1


def test_error_hierarchy():
    assert issubclass(Overflow, EncodeError)
    assert issubclass(Overflow, DecodeError)
    assert issubclass(InvalidDigit, DecodeError)
    assert issubclass(PunycodeError, ValueError)
    with pytest.raises(ValueError):
        decode("a-b- x")


def test_error_message_includes_position():
    with pytest.raises(UnexpectedEnd) as ei:
        decode("td")
    assert str(ei.value) == "input ends in the middle of a delta at position 2"
