import pytest

from hashboggle.strhash import StringHash, letter_digit_to_number, main


@pytest.mark.parametrize(
    "key, expected",
    [
        ("abc", 9953503400),
        ("abc123", 473827885525100),
        ("antidisestablishmentarianism", 1137429692708383810),
        ("9999999999999999999999999999", 7116200424364995040),
        ("", 0),
        ("B", 261934300),
        ("gfedcba", 80987980279261566),
        ("abcdefghijkl", 99959782498362165),
        ("abcdefghijklm", 177508434398820306),
        ("usccs103landcs104l", 2322055531449905840),
    ],
)
def test_debug_hash_values(key, expected):
    assert StringHash(True)(key) == expected


def test_default_is_debug():
    assert StringHash()("abc") == 9953503400


def test_case_insensitive():
    h = StringHash(True)
    assert h("USCCS103LandCS104L") == h("usccs103landcs104l") == 2322055531449905840


def test_randomize_mixed_case_debug_value():
    assert StringHash(True)("AntidisEstablishmentAriaNism") == 1137429692708383810


def test_randomized_seeds_give_distinct_hashes():
    key = "AntidisEstablishmentAriaNism"
    values = [StringHash(True)(key)]
    for seed in range(1, 6):
        h = StringHash(True)
        h.generate_r_values(seed)
        values.append(h(key))
    assert len(set(values)) == len(values)


def test_generate_r_values_deterministic_for_seed():
    a = StringHash()
    b = StringHash()
    a.generate_r_values(2024)
    b.generate_r_values(2024)
    assert a.r_values == b.r_values
    assert a("hello") == b("hello")


def test_non_debug_replaces_r_values():
    h = StringHash(False)
    assert len(h.r_values) == 5
    assert h.r_values != [983132572, 1468777056, 552714139, 984953261, 261934300]


def test_hash_fits_64_bits():
    h = StringHash(True)
    assert 0 <= h("z" * 30) < 2**64


@pytest.mark.parametrize(
    "ch, expected",
    [("a", 0), ("A", 0), ("z", 25), ("Z", 25), ("0", 26), ("9", 35), ("!", 0), (" ", 0)],
)
def test_letter_digit_to_number(ch, expected):
    assert letter_digit_to_number(ch) == expected


def test_non_alnum_chars_count_as_a():
    h = StringHash(True)
    assert h("a-c") == h("aac")


def test_main_prints_hash(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "h(abc)=9953503400\n"


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Please provide a string to hash\n"