"""Seed a sample corpus, training file and properties file for development.

Usage:
    python scripts/seed_data.py [--root data]
    qa-engine -c data/qa.properties -train
    qa-engine -c data/qa.properties "Who developed the Macintosh computer?"
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from qa_engine.indexing.bm25_index import CorpusIndex
from qa_engine.ingestion.loader import load_corpus

SAMPLE_DOCS = {
    "D1": "The Macintosh was developed by Apple in 1984. "
    "Steve Jobs presented the Macintosh computer on January 24, 1984.",
    "D2": "Milan is a city in northern Italy. About 1.4 million people live in Milan. "
    "The Duomo di Milano is the cathedral of Milan.",
    "D3": "The telephone was invented by Alexander Graham Bell. "
    "He was born on March 3, 1847 in Edinburgh.",
    "D4": "The Eiffel Tower is located in Paris. It is 330 metres tall "
    "and was completed on March 31, 1889.",
    "D5": "Photosynthesis is the process by which green plants turn sunlight into chemical energy.",
}

TRAINING = [
    ("PERSON", "Who wrote Hamlet?"),
    ("PERSON", "Who developed the first computer?"),
    ("PERSON", "Who invented the telephone?"),
    ("PERSON", "Who painted the Mona Lisa?"),
    ("PERSON", "Who was the first president of the United States?"),
    ("LOCATION", "Where is Milan?"),
    ("LOCATION", "Where is the Eiffel Tower located?"),
    ("LOCATION", "In which country is Rome?"),
    ("LOCATION", "Where was Alexander Graham Bell born?"),
    ("DATE", "When was the Macintosh released?"),
    ("DATE", "When did World War II end?"),
    ("DATE", "What year did Apple go public?"),
    ("DATE", "When was the Eiffel Tower completed?"),
    ("NUMBER", "How many people live in Milan?"),
    ("NUMBER", "How tall is the Eiffel Tower?"),
    ("NUMBER", "How much does a computer cost?"),
    ("DEFINITION", "What is a computer?"),
    ("DEFINITION", "What is photosynthesis?"),
    ("DEFINITION", "What does NASA stand for?"),
    ("OTHER", "Which company makes the iPhone?"),
    ("OTHER", "What color is the sky?"),
]

SYNONYMS = {
    "developed": ["created", "built", "designed"],
    "invented": ["created", "developed"],
    "tall": ["high"],
}


def main(root: Path) -> None:
    docs_dir = root / "docs"
    docs_dir.mkdir(parents=True, exist_ok=True)
    for doc_id, text in SAMPLE_DOCS.items():
        (docs_dir / f"{doc_id}.txt").write_text(text, encoding="utf-8")
    print(f"Wrote {len(SAMPLE_DOCS)} documents to {docs_dir}")

    train_file = root / "train.txt"
    train_file.write_text(
        "\n".join(f"{label}\t{text}" for label, text in TRAINING) + "\n", encoding="utf-8"
    )
    print(f"Wrote {len(TRAINING)} training questions to {train_file}")

    synonyms_file = root / "synonyms.json"
    synonyms_file.write_text(json.dumps(SYNONYMS, indent=2), encoding="utf-8")

    properties = root / "qa.properties"
    properties.write_text(
        "# qa-engine development configuration\n"
        f"DOCUMENT_PATH={docs_dir}\n"
        f"CORPUS_PATH={train_file}\n"
        f"CLASSIFIER_PATH={root / 'classifier.json'}\n"
        f"SYNONYMS_PATH={synonyms_file}\n"
        f"INDEX_PATH={root / 'index'}\n",
        encoding="utf-8",
    )
    print(f"Wrote properties to {properties}")

    index = CorpusIndex(index_path=str(root / "index"))
    index.add_documents(load_corpus(docs_dir))
    index.save()
    print(f"Index snapshot size: {index.size}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed sample data for qa-engine")
    parser.add_argument("--root", default="data", help="Output directory (default: data)")
    args = parser.parse_args()
    main(Path(args.root))
