from __future__ import annotations

from char_markov import LanguageModel, RandomSource, SymbolCounter


def counter_demo(rng: RandomSource) -> None:
    counter = SymbolCounter()
    for ch in "mehome":
        counter.update(ch)
    counter.normalize()
    print(counter)

    print("SAMPLES:", "".join(counter.sample(rng.next()) for _ in range(10)))


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
    )

    counter_demo(RandomSource(seed=20))

    n = 4
    model = LanguageModel(window_length=n, seed=20)
    model.train(text)
    print(model.generate("nlp ", 120))


if __name__ == "__main__":
    main()
