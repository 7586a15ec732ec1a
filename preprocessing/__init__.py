from dataclasses import dataclass, field


@dataclass
class Term:
    term: str = ""
    original_term: str = ""  # before stemming
    position: int = -1  # index in the filtered token stream


@dataclass
class PreprocessedText:
    normalized_text: str
    words: list[Term] = field(default_factory=list)

    def __iter__(self):
        for word in self.words:
            yield word

    def __len__(self):
        return len(self.words)
