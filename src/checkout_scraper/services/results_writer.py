"""
Results Writer
Serializes the final candidate sequence, once per run.
json  -> overwrites the file with a JSON array
jsonl -> appends one JSON line (the whole array) per run
"""

import json
from pathlib import Path
from typing import List, Optional

from checkout_scraper.models import ListingCandidate
from checkout_scraper.utils.logger_config import setup_logger, log

logger = setup_logger('results_writer')


def serialize_candidates(candidates: List[Optional[ListingCandidate]]) -> list:
    return [
        candidate.model_dump(exclude_unset=True) if candidate is not None else None
        for candidate in candidates
    ]


def write_results(candidates: List[Optional[ListingCandidate]], path, output_format: str = 'json') -> Path:
    """Write candidates to path and return the resolved path"""
    path = Path(path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    payload = serialize_candidates(candidates)

    if output_format == 'json':
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
    elif output_format == 'jsonl':
        with open(path, 'a', encoding='utf-8') as f:
            f.write(json.dumps(payload, ensure_ascii=False) + '\n')
    else:
        raise ValueError(f"Unknown output format: {output_format}")

    log(logger, 'info', f"Wrote {len(payload)} entries to {path}", 'WRITER', 'OUTPUT')
    return path
