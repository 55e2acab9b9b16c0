from hangman.services.games.letters import decode_letters, encode_letters


def test_empty_set_encodes_to_empty_string():
    assert encode_letters(set()) == ''
    assert decode_letters('') == set()
    assert decode_letters(None) == set()


def test_encoding_is_sorted_and_comma_joined():
    assert encode_letters({'T', 'A', 'G'}) == 'A,G,T'


def test_decode_skips_blank_tokens():
    assert decode_letters('A,, ,G , T') == {'A', 'G', 'T'}


def test_round_trip_preserves_set():
    letters = set('HANGMZQX')
    assert decode_letters(encode_letters(letters)) == letters
    assert decode_letters(encode_letters(['B', 'A', 'B'])) == {'A', 'B'}
