import pytest

from speechkit.bias_lm import BiasLm, load_increment_bias

PHONES = {"a": 1, "b": 2, "c": 3}
BIAS = 20.0


def identity(piece):
    return piece


def make(sequences, weights, bias=BIAS):
    lm = BiasLm(PHONES, bias)
    lm.build_graph(sequences, weights)
    return lm


def test_first_arc_earns_increment_bias():
    lm = make([[1, 2]], [5.0])
    score, state = lm.score(0, 1)
    assert score == BIAS
    assert state != 0


def test_completing_hotword_adds_weight():
    lm = make([[1, 2]], [5.0])
    _, state = lm.score(0, 1)
    score, final_state = lm.score(state, 2)
    assert score == BIAS + 5.0
    assert lm.nodes[final_state].is_final
    assert lm.nodes[final_state].score == 2 * BIAS


def test_broken_partial_match_gives_bias_back():
    lm = make([[1, 2]], [5.0])
    first, state = lm.score(0, 1)
    second, back = lm.score(state, 3)
    assert back == 0
    assert first + second == pytest.approx(0.0)


def test_unmatched_label_at_root_scores_zero():
    lm = make([[1, 2]], [5.0])
    assert lm.score(0, 3) == (0.0, 0)


@pytest.mark.parametrize("label", [0, -1, len(PHONES) + 1])
def test_out_of_range_label_keeps_state(label):
    lm = make([[1, 2]], [5.0])
    assert lm.score(0, label) == (0.0, 0)


def test_empty_graph_scores_zero():
    lm = make([], [])
    assert lm.score(0, 1) == (0.0, 0)


def test_mismatched_weights_rejected():
    lm = BiasLm(PHONES, BIAS)
    with pytest.raises(ValueError):
        lm.build_graph([[1], [2]], [1.0])


def test_unknown_state_rejected():
    lm = make([[1]], [1.0])
    with pytest.raises(ValueError):
        lm.score(99, 1)


def test_aho_corasick_back_off_continues_other_hotword():
    lm = make([[1, 2], [2, 3]], [5.0, 7.0])
    _, s1 = lm.score(0, 1)
    _, s2 = lm.score(s1, 2)
    score, s3 = lm.score(s2, 3)
    assert score == BIAS + 7.0
    assert lm.nodes[s3].is_final


def test_duplicate_hotword_keeps_smaller_weight():
    lm = make([[1], [1]], [5.0, 3.0])
    score, _ = lm.score(0, 1)
    assert score == BIAS + 3.0


def test_root_children_back_off_to_root():
    lm = make([[1, 2], [3]], [1.0, 1.0])
    for label in (1, 3):
        _, state = lm.score(0, label)
        assert lm.nodes[state].back_off == 0
    assert lm.nodes[0].back_off == -1


def test_from_hotwords_builds_graph():
    lm = BiasLm.from_hotwords({"ab": 4}, BIAS, PHONES, identity, list)
    _, state = lm.score(0, 1)
    score, _ = lm.score(state, 2)
    assert score == BIAS + 4


def test_from_hotwords_uses_lexicon_phones():
    lexicon = {"x": "a b"}
    lm = BiasLm.from_hotwords({"x": 6}, BIAS, PHONES, lexicon.get, list)
    _, state = lm.score(0, 1)
    score, _ = lm.score(state, 2)
    assert score == BIAS + 6


def test_from_hotwords_drops_oov_words():
    lm = BiasLm.from_hotwords({"az": 3}, BIAS, PHONES, identity, list)
    assert lm.score(0, 1) == (0.0, 0)


def test_from_hotwords_sets_increment_bias():
    lm = BiasLm.from_hotwords({"a": 1}, 12, PHONES, identity, list)
    assert lm.increment_bias == 12.0
    assert lm.score(0, 1)[0] == 12.0 + 1


def test_phone_label():
    lm = BiasLm(PHONES)
    assert lm.phone_label(1) == "a"
    assert lm.phone_label(2) == "b"
    assert lm.phone_label(-1) == ""
    assert lm.phone_label(len(PHONES)) == ""


def test_vocab_word_to_phone_ids():
    lm = BiasLm(PHONES)
    assert lm.vocab_word_to_phone_ids("cab") == [3, 1, 2]
    assert lm.vocab_word_to_phone_ids("abx") == []


def test_load_increment_bias_block(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("other: 1\nbias_lm_conf:\n  increment_weight: 12.5\n", encoding="utf-8")
    assert load_increment_bias(path) == 12.5


def test_load_increment_bias_flow(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("bias_lm_conf: {increment_weight: 8}\n", encoding="utf-8")
    assert load_increment_bias(path) == 8.0


def test_load_increment_bias_missing_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("model_conf:\n  increment_weight: 3\n", encoding="utf-8")
    assert load_increment_bias(path, default=20.0) == 20.0


def test_load_increment_bias_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_increment_bias(tmp_path / "absent.yaml")