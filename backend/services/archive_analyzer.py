"""
Archive Analyzer - Find and compare transaction files in extracted archives

Transaction files come in pairs named ``babyy-risk-{id}.txt`` and
``candyy-risk-{id}.txt``. A pair is compared when both live in the same
directory of the archive.
"""

from __future__ import annotations

import re
import zipfile
from pathlib import Path

from models.archive import (
    TransactionComparison,
    TransactionFile,
    TransactionFileType,
    TransactionInfo,
)
from services.diff_generator import DiffGenerator
from services.storage import UploadStorage

TRANSACTION_FILE_PATTERN = re.compile(r"^(babyy-risk-|candyy-risk-).*\.txt$")

FILE_PREFIXES = {
    "babyy-risk-": TransactionFileType.BABY,
    "candyy-risk-": TransactionFileType.CANDY,
}


def extract_zip(src: str | Path, dest: str | Path) -> None:
    """Extract every archive entry below dest"""
    Path(dest).mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(src) as archive:
        archive.extractall(dest)


def is_transaction_file(file_name: str) -> bool:
    return TRANSACTION_FILE_PATTERN.match(file_name) is not None


def parse_transaction_file_name(file_name: str) -> tuple[str, TransactionFileType | None]:
    """babyy-risk-13233-2332.txt -> ("13233-2332", BABY)"""
    name = file_name.removesuffix(".txt")

    for prefix, file_type in FILE_PREFIXES.items():
        if name.startswith(prefix):
            return name[len(prefix):], file_type

    return "", None


def _walk(root: Path) -> list[Path]:
    # Depth-first, lexical within each directory
    return sorted(root.rglob("*"), key=lambda p: p.relative_to(root).parts)


def analyze_extracted_archive(extract_dir: str | Path) -> tuple[list[str], list[TransactionInfo]]:
    """Collect the directory list and the transactions found under extract_dir"""
    root = Path(extract_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"extract directory not found: {extract_dir}")

    directories: list[str] = []
    transactions: dict[str, TransactionInfo] = {}

    for path in _walk(root):
        rel_path = path.relative_to(root)

        if path.is_dir():
            directories.append(rel_path.as_posix())
            continue

        if not is_transaction_file(path.name):
            continue

        transaction_id, file_type = parse_transaction_file_name(path.name)
        if not transaction_id:
            continue

        directory = rel_path.parent.as_posix()
        transaction = transactions.setdefault(transaction_id, TransactionInfo(id=transaction_id))
        if directory not in transaction.directories:
            transaction.directories.append(directory)

        transaction.files.append(
            TransactionFile(
                directory=directory,
                file_name=path.name,
                file_path=str(path),
                type=file_type,
            )
        )

    return sorted(directories), sorted(transactions.values(), key=lambda t: t.id)


def compare_transaction_files(
    transactions: list[TransactionInfo],
    diff_generator: DiffGenerator,
) -> list[TransactionComparison]:
    """Diff the baby and candy file of each transaction, per directory"""
    comparisons = []

    for transaction in transactions:
        for directory in transaction.directories:
            found: dict[TransactionFileType, tuple[str, str]] = {}

            for file in transaction.files:
                if file.directory != directory:
                    continue
                try:
                    content = UploadStorage.read_text(file.file_path)
                except OSError as e:
                    print(f"[ArchiveCompare] Skipping unreadable file {file.file_path}: {e}")
                    continue
                found[file.type] = (file.file_name, content)

            baby = found.get(TransactionFileType.BABY)
            candy = found.get(TransactionFileType.CANDY)
            if baby is None or candy is None:
                continue

            comparison = diff_generator.compare_texts(baby[1], candy[1])
            comparisons.append(
                TransactionComparison(
                    transaction_id=transaction.id,
                    directory=directory,
                    baby_file=baby[0],
                    candy_file=candy[0],
                    baby_content=baby[1],
                    candy_content=candy[1],
                    diff_html=comparison.diff_html,
                    diff_lines=comparison.diff_lines,
                )
            )

    return comparisons
