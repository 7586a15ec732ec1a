import logging

from dataclasses import dataclass

from indexor.errors import MalformedProximityWindow
from indexor.merge import intersect, positional_intersect, union
from indexor.structures import IndexBase, Posting
from preprocessing.preprocessor import Preprocessor
from preprocessing.tokenizer import split_tokens

from constants.index import (
    AND_OPERATOR,
    DEFAULT_PROXIMITY_WINDOW,
    OR_OPERATOR,
    WINDOW_PREFIX,
)

logger = logging.getLogger(__name__)


class Query:
    def __init__(self, query: str, preprocessor: Preprocessor):
        self.query = query
        self.preprocessor = preprocessor

    def parse(self):
        return self.query

    def tokens(self) -> list[str]:
        return split_tokens(self.query)

    def evaluate(self, index: IndexBase) -> list[Posting]:
        raise NotImplementedError

    def pprint(self, level=0):
        print(self.ppformat(level=level))

    def ppformat(self, level=0):
        return " " * level + self.query + "\n"

    def __str__(self):
        return self.ppformat()


class TermQuery(Query):
    def __init__(self, query: str, preprocessor: Preprocessor):
        super().__init__(query, preprocessor)

        self.parsed_query = self.parse()

    def parse(self):
        return self.preprocessor.query_term(self.query)

    def evaluate(self, index: IndexBase) -> list[Posting]:
        postings = index.lookup(self.parsed_query)
        if not postings:
            logger.debug(f"Unknown term {self.query} -> {self.parsed_query}")

        return postings

    def ppformat(self, level=0):
        return " " * level + self.parsed_query + "\n"


@dataclass
class BooleanClause:
    operator: str | None
    operand: TermQuery


class BooleanQuery(Query):
    """
    Left to right fold of terms joined by AND / OR. There is no precedence and
    no grouping. A term with no pending operator only seeds an empty result;
    dangling or doubled operators are ignored.
    """

    operators = (AND_OPERATOR, OR_OPERATOR)

    def __init__(self, query: str, preprocessor: Preprocessor):
        super().__init__(query, preprocessor)

        self.clauses: list[BooleanClause] = self.parse()

    def parse(self):
        clauses = []
        pending = None
        for token in self.tokens():
            if token in self.operators:
                pending = token
                continue

            clauses.append(BooleanClause(pending, TermQuery(token, self.preprocessor)))
            pending = None

        return clauses

    def evaluate(self, index: IndexBase) -> list[Posting]:
        result: list[Posting] = []
        for clause in self.clauses:
            postings = clause.operand.evaluate(index)

            if clause.operator == AND_OPERATOR:
                result = intersect(result, postings)
            elif clause.operator == OR_OPERATOR:
                result = union(result, postings)
            elif not result:
                result = postings

        return result

    def ppformat(self, level=0):
        out = ""
        for clause in self.clauses:
            if clause.operator is not None:
                out += " " * level + clause.operator + "\n"
            out += clause.operand.ppformat(level + 1)

        return out


class ProximityQuery(Query):
    """
    Ordered terms where each consecutive pair must occur within `window`
    positions of each other. A `/k` token sets the window for the whole query.
    """

    def __init__(self, query: str, preprocessor: Preprocessor):
        super().__init__(query, preprocessor)

        self.parsed_query, self.window = self.parse()

    @staticmethod
    def parse_window(token: str) -> int:
        value = token[len(WINDOW_PREFIX) :].removeprefix("+")
        if value.isascii() and value.isdigit():
            return int(value)

        logger.warning(str(MalformedProximityWindow(token, DEFAULT_PROXIMITY_WINDOW)))
        return DEFAULT_PROXIMITY_WINDOW

    def parse(self):
        terms = []
        window = DEFAULT_PROXIMITY_WINDOW
        for token in self.tokens():
            if token.startswith(WINDOW_PREFIX):
                window = self.parse_window(token)
            else:
                terms.append(TermQuery(token, self.preprocessor))

        return terms, window

    def evaluate(self, index: IndexBase) -> list[Posting]:
        result: list[Posting] = []
        for i, term in enumerate(self.parsed_query):
            postings = term.evaluate(index)
            if i == 0:
                result = postings
            else:
                result = positional_intersect(result, postings, self.window)

        return result

    def ppformat(self, level=0):
        terms = ", ".join(term.parsed_query for term in self.parsed_query)
        return " " * level + f"#{self.window}({terms})" + "\n"


def is_proximity_query(query: str) -> bool:
    return WINDOW_PREFIX in query
