from multiwordle import Dictionary

WORDS = "\n".join([
    "crane", "crone", "abbey", "babes", "slate", "raise", "stone", "eagle",
])


def make_dictionary(text: str = WORDS, word_length: int = 5) -> Dictionary:
    return Dictionary.load(text, word_length)


class ScriptedRng:
    """Stands in for random.Random; `choice` hands out pre-arranged words in order."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = 0

    def choice(self, seq):
        word = self.picks[self.calls % len(self.picks)]
        self.calls += 1
        assert word in seq
        return word
