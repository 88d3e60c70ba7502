"""Hotword biasing graph: a phone-level prefix tree with Aho-Corasick back-offs."""

from __future__ import annotations

import logging
import time
from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_NODE = 0
VALUE_ZERO = 0.0
DEFAULT_INCREMENT_BIAS = 20.0

Splitter = Callable[[str], Iterable[str]]


@dataclass
class BiasLmNode:
    """Per-state data: accumulated bias, whether a hotword ends here, back-off state."""

    score: float = 0.0
    is_final: bool = False
    back_off: int = -1


class BiasLm:
    """Scores phone labels against a set of weighted hotwords.

    Each arc into a hotword prefix earns ``increment_bias``; completing a
    hotword adds its weight. Leaving a partial match walks back-off arcs
    that take the earned bias back.
    """

    def __init__(
        self,
        phone_ids: Mapping[str, int],
        increment_bias: float = DEFAULT_INCREMENT_BIAS,
        scale: float = 1.0,
    ) -> None:
        self.phone_ids = dict(phone_ids)
        self._id_to_phone = {value: key for key, value in self.phone_ids.items()}
        self.increment_bias = float(increment_bias)
        self.scale = scale
        self.nodes: list[BiasLmNode] = []
        self._arcs: list[dict[int, int]] = []
        self._final: list[float | None] = []
        self._back_off_arcs: list[tuple[float, int] | None] = []
        self._built = False

    @classmethod
    def from_hotwords(
        cls,
        hotwords: Mapping[str, float],
        increment_bias: float,
        phone_ids: Mapping[str, int],
        word_to_lex: Callable[[str], str],
        splitter: Splitter,
    ) -> "BiasLm":
        """Build a graph from ``{hotword: weight}``.

        ``splitter`` cuts a hotword into lexicon units and ``word_to_lex``
        turns a unit into space-separated phones. Hotwords with a phone
        outside ``phone_ids`` are left out.
        """
        started = time.perf_counter()
        model = cls(phone_ids, increment_bias)
        sequences: list[list[int]] = []
        weights: list[float] = []
        for word, weight in hotwords.items():
            ids: list[int] = []
            is_oov = False
            for piece in splitter(word):
                for token in (t for t in word_to_lex(piece).split(" ") if t):
                    if token not in model.phone_ids:
                        is_oov = True
                        break
                    ids.append(model.phone_ids[token])
            if not is_oov:
                sequences.append(ids)
                weights.append(float(weight))
        model.build_graph(sequences, weights)
        logger.info("Build bias lm takes %f s", time.perf_counter() - started)
        return model

    def build_graph(
        self, sequences: Sequence[Sequence[int]], weights: Sequence[float]
    ) -> None:
        """Build the deterministic prefix tree and its back-off arcs."""
        sequences = [list(sequence) for sequence in sequences]
        weights = [float(weight) for weight in weights]
        if not sequences:
            logger.info("Skip building biaslm graph, hotword not exits.")
            return
        if len(sequences) != len(weights):
            raise ValueError(
                f"{len(sequences)} sequences but {len(weights)} weights"
            )

        children: list[dict[int, int]] = [{}]
        finals: list[float | None] = [None]
        depths = [0]
        for sequence, weight in zip(sequences, weights):
            state = ROOT_NODE
            for label in sequence:
                nxt = children[state].get(label)
                if nxt is None:
                    nxt = len(children)
                    children.append({})
                    finals.append(None)
                    depths.append(depths[state] + 1)
                    children[state][label] = nxt
                state = nxt
            if sequence:
                previous = finals[state]
                finals[state] = weight if previous is None else min(previous, weight)

        order = [ROOT_NODE]
        for old in order:
            order.extend(children[old][label] for label in sorted(children[old]))
        new_id = {old: new for new, old in enumerate(order)}

        self._arcs = [
            {label: new_id[target] for label, target in sorted(children[old].items())}
            for old in order
        ]
        self._final = [finals[old] for old in order]
        self.nodes = [
            BiasLmNode(
                score=self.increment_bias * depths[old],
                is_final=finals[old] is not None,
            )
            for old in order
        ]
        self._back_off_arcs = [None] * len(order)
        self._link_back_offs()
        self._built = True

    def _back_off_score(self, state: int) -> float:
        node = self.nodes[state]
        if node.is_final:
            return 0.0
        return self.nodes[node.back_off].score - node.score

    def _link_back_offs(self) -> None:
        queue: deque[int] = deque()
        for child in self._arcs[ROOT_NODE].values():
            self.nodes[child].back_off = ROOT_NODE
            self._back_off_arcs[child] = (self._back_off_score(child), ROOT_NODE)
            queue.append(child)
        while queue:
            state = queue.popleft()
            for label, nxt in self._arcs[state].items():
                temp = self.nodes[state].back_off
                if nxt == ROOT_NODE or nxt == temp:
                    continue
                while True:
                    found = self._arcs[temp].get(label)
                    if found is not None:
                        back_off = found
                        break
                    if temp == ROOT_NODE:
                        back_off = ROOT_NODE
                        break
                    temp = self.nodes[temp].back_off
                self.nodes[nxt].back_off = back_off
                self._back_off_arcs[nxt] = (self._back_off_score(nxt), back_off)
                queue.append(nxt)

    def score(self, state: int, label: int) -> tuple[float, int]:
        """Return the bias for reading ``label`` in ``state`` and the new state."""
        if label < 1 or label > len(self.phone_ids) or not self._built:
            return VALUE_ZERO, state
        if not 0 <= state < len(self._arcs):
            raise ValueError(f"Unknown bias lm state {state}")
        current = state
        total = VALUE_ZERO
        while True:
            previous = current
            nxt = self._arcs[current].get(label)
            if nxt is not None:
                total += self.increment_bias
                if self.nodes[nxt].is_final:
                    total += self._final[nxt]
                current = nxt
                break
            back = self._back_off_arcs[current]
            if back is not None:
                weight, target = back
                total += weight
                current = target
            if previous == ROOT_NODE and current == ROOT_NODE:
                break
        return total, current

    def vocab_word_to_phone_ids(
        self, word: str, splitter: Splitter = list
    ) -> list[int]:
        """Map each unit of ``word`` to its phone id; empty if any is unknown."""
        ids: list[int] = []
        for piece in splitter(word):
            if piece not in self.phone_ids:
                return []
            ids.append(self.phone_ids[piece])
        return ids

    def phone_label(self, phone_id: int) -> str:
        """Return the phone named by ``phone_id``, or "" when out of range."""
        if phone_id < 0 or phone_id >= len(self.phone_ids):
            return ""
        return self._id_to_phone.get(phone_id, "")


def _clean(value: str) -> str:
    return value.strip().strip("'\"")


def _find_increment_weight(text: str) -> str | None:
    in_section = False
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].rstrip()
        if not line.strip():
            continue
        stripped = line.strip()
        indent = len(line) - len(line.lstrip())
        key, sep, rest = stripped.partition(":")
        if indent == 0:
            in_section = False
            if key.strip() != "bias_lm_conf" or not sep:
                continue
            rest = rest.strip()
            if rest.startswith("{") and rest.endswith("}"):
                for item in rest[1:-1].split(","):
                    item_key, item_sep, item_value = item.partition(":")
                    if item_sep and item_key.strip() == "increment_weight":
                        return _clean(item_value)
            else:
                in_section = True
            continue
        if in_section and sep and key.strip() == "increment_weight":
            return _clean(rest)
    return None


def load_increment_bias(
    path: str | Path, default: float = DEFAULT_INCREMENT_BIAS
) -> float:
    """Read ``bias_lm_conf.increment_weight`` from a YAML config.

    A missing or unreadable value gives ``default``; a missing file raises.
    """
    text = Path(path).read_text(encoding="utf-8")
    value = _find_increment_weight(text)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default