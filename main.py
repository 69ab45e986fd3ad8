"""Main entry point for the document chunker."""

import sys
import argparse
import json
from pathlib import Path
from dotenv import load_dotenv
from chunkwise.config import ChunkerConfig
from chunkwise.chunking import TextChunker
from chunkwise.document_processor import DocumentProcessor
from chunkwise.errors import ConfigurationError

PREVIEW_LENGTH = 100


def truncate(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Shorten text to length characters, ending with an ellipsis when cut."""
    if len(text) <= length:
        return text
    return text[: length - 3] + "..."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Split a document into sentence-aligned, token-bounded chunks for embedding"
    )
    parser.add_argument(
        "document_path",
        help="Path to the document file to process (.pdf, .docx, .txt, .md)"
    )
    parser.add_argument("--chunk-size", type=int, default=None, help="Target tokens per chunk (env CHUNK_SIZE, default 200)")
    parser.add_argument("--chunk-overlap", type=int, default=None, help="Target token overlap (env CHUNK_OVERLAP, default 50)")
    parser.add_argument(
        "--encoding",
        default=None,
        help="tiktoken encoding for exact token counts, e.g. cl100k_base (env TOKEN_ENCODING; default: whitespace words)"
    )
    parser.add_argument(
        "--splitter",
        choices=["default", "smart"],
        default=None,
        help="Sentence splitter (env SENTENCE_SPLITTER, default 'default')"
    )
    parser.add_argument(
        "--embed",
        action="store_true",
        help="Compute an embedding per chunk (OpenAI when OPENAI_API_KEY is set, otherwise sentence-transformers)"
    )
    parser.add_argument("--output", default=None, help="Write chunks as JSON to this path")
    parser.add_argument("--preview", type=int, default=5, help="Number of chunks to print (default 5)")
    return parser


def main(argv=None):
    """Main function to run the document chunker."""
    # Load environment variables
    load_dotenv()

    args = build_parser().parse_args(argv)
    document_path = args.document_path

    if not Path(document_path).exists():
        print(f"Error: Document not found at {document_path}")
        sys.exit(1)

    try:
        config = ChunkerConfig.from_env(
            chunk_size=args.chunk_size,
            chunk_overlap=args.chunk_overlap,
            token_counter=args.encoding,
            sentence_splitter=args.splitter,
        )
        chunker = TextChunker(config)
    except ConfigurationError as e:
        print(f"✗ {e}")
        sys.exit(1)

    print(f"Processing document: {document_path}")
    print(f"Chunker: {chunker!r}")
    print("-" * 50)

    try:
        document = DocumentProcessor().parse(document_path)
    except ValueError as e:
        print(f"✗ {e}")
        sys.exit(1)
    print(f"Parsed document with {len(document.content)} characters")

    chunks = chunker.chunk(document.content)
    print(f"\n✓ Created {len(chunks)} chunks")

    for i, chunk in enumerate(chunks[: args.preview]):
        print(f"\nChunk {i + 1}:")
        print(f"  Token Size: {chunk.token_size}")
        print(f"  Sentences: {chunk.start_sentence}-{chunk.end_sentence}")
        print(f"  Preview: {truncate(chunk.text)}")
    if len(chunks) > args.preview:
        print(f"\n  ... and {len(chunks) - args.preview} more chunks")

    output_path = args.output
    if args.embed:
        from chunkwise import embeddings as emb

        print("\nComputing embeddings...")
        try:
            records = [
                record.model_dump()
                for record in emb.embed_chunks(chunks, metadata=document.metadata, verbose=True)
            ]
        except ImportError as e:
            print(f"\n⚠ Embedding skipped: {e}")
            sys.exit(1)
        except RuntimeError as e:
            print(f"\n✗ {e}")
            sys.exit(1)
        if output_path is None:
            output_dir = Path("outputs")
            output_dir.mkdir(exist_ok=True)
            output_path = str(output_dir / f"{Path(document_path).stem}_chunks.json")
    elif output_path:
        records = [{**chunk.model_dump(), "metadata": document.metadata} for chunk in chunks]

    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
        print(f"\n✓ Results exported: {output_path}")


if __name__ == "__main__":
    main()
