import argparse
import logging
import time

from indexor.index import BooleanModel
from indexor.in_memory_index import InMemoryIndex

from constants.index import SNAPSHOT_PATH

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def run_query(model: BooleanModel, query: str, mode: str = "auto"):
    if mode == "boolean":
        return model.query_boolean(query)
    elif mode == "positional":
        return model.query_positional(query)

    return model.search(query)


def print_results(model: BooleanModel, documents):
    if not documents:
        print("No documents found.")
        return

    for document in documents:
        details = model.get_doc(document.id)
        if details is None:
            continue

        print(f"{document.id}\t{details.name}\t{details.summary}...")


def index_command(args):
    model = BooleanModel(stop_words_file=args.stop_words_file, show_progress=True)
    summary = model.index(args.directory)
    model.save(args.snapshot)

    for error in model.errors:
        print(f"Skipped: {error}")
    print(
        f"Indexed {summary['documents']} documents ({summary['skipped']} skipped), "
        f"{summary['terms']} terms -> {args.snapshot}"
    )


def query_command(args):
    model = BooleanModel.load(args.snapshot)
    print_results(model, run_query(model, args.query, args.mode))


def show_command(args):
    model = BooleanModel.load(args.snapshot)
    details = model.get_doc(args.doc_id)
    if details is None:
        print(f"Document {args.doc_id} not found.")
        return 1

    print(details.name)
    print()
    print(details.text)


def dump_command(args):
    model = BooleanModel.load(args.snapshot)
    if args.format == "txt":
        model.posting_store.write_index_to_txt(args.output)
    else:
        with open(args.output, "w") as f:
            f.write(model.to_json())

    print(f"Wrote model to {args.output}")


def load_txt_command(args):
    posting_store = InMemoryIndex(load_path=args.path)
    print(f"TermCount={posting_store.get_term_count()}")


def repl_command(args):
    model = BooleanModel.load(args.snapshot)
    print(f"DocumentCount={model.get_document_count()}")
    print(f"TermCount={model.get_term_count()}")

    while True:
        try:
            query = input(
                "Enter a query (Press q to quit); use AND / OR for boolean queries, "
                "or /k for proximity queries; 'd <id>' shows a document: "
            )
        except EOFError:
            break

        if query.strip() == "q":
            break

        start = time.time()
        if query[:2] == "d ":
            try:
                details = model.get_doc(int(query[2:]))
            except ValueError:
                print(f"Invalid document id: {query[2:]}")
                continue

            print(details if details is not None else "Document not found.")
            continue

        documents = model.search(query)
        print(f"Time taken for query: {time.time() - start}")
        print_results(model, documents)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Boolean and proximity retrieval over a directory of text files"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="Index a directory")
    index_parser.add_argument("directory", type=str)
    index_parser.add_argument("--snapshot", type=str, default=SNAPSHOT_PATH)
    index_parser.add_argument("--stop-words-file", type=str, default="")
    index_parser.set_defaults(func=index_command)

    query_parser = subparsers.add_parser("query", help="Run a single query")
    query_parser.add_argument("query", type=str)
    query_parser.add_argument("--snapshot", type=str, default=SNAPSHOT_PATH)
    query_parser.add_argument(
        "--mode", choices=["auto", "boolean", "positional"], default="auto"
    )
    query_parser.set_defaults(func=query_command)

    show_parser = subparsers.add_parser("show", help="Print a document")
    show_parser.add_argument("doc_id", type=int)
    show_parser.add_argument("--snapshot", type=str, default=SNAPSHOT_PATH)
    show_parser.set_defaults(func=show_command)

    dump_parser = subparsers.add_parser("dump", help="Write the model to a file")
    dump_parser.add_argument("output", type=str)
    dump_parser.add_argument("--snapshot", type=str, default=SNAPSHOT_PATH)
    dump_parser.add_argument("--format", choices=["json", "txt"], default="json")
    dump_parser.set_defaults(func=dump_command)

    load_txt_parser = subparsers.add_parser(
        "load-txt", help="Check a posting store written with 'dump --format txt'"
    )
    load_txt_parser.add_argument("path", type=str)
    load_txt_parser.set_defaults(func=load_txt_command)

    repl_parser = subparsers.add_parser("repl", help="Interactive query loop")
    repl_parser.add_argument("--snapshot", type=str, default=SNAPSHOT_PATH)
    repl_parser.set_defaults(func=repl_command)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    return args.func(args) or 0


if __name__ == "__main__":
    raise SystemExit(main())
