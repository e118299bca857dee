"""
Parser for GFF3 (General Feature Format version 3) files.
"""

import time
import logging
from urllib.parse import unquote

from flygff.models.items import GFF3Record


def parse_attributes(column):
    """Parse the ninth GFF3 column into a mapping of name -> list of values."""
    attributes = {}
    for attr in column.split(';'):
        attr = attr.strip()
        if '=' not in attr:
            continue
        key, value = attr.split('=', 1)
        attributes.setdefault(unquote(key), []).extend(unquote(v) for v in value.split(','))
    return attributes


def parse_gff3_line(line, line_num=None):
    """Parse one feature line, returning None if it is not a valid record."""
    fields = line.rstrip('\n').split('\t')

    if len(fields) < 9:
        logging.warning(f"Line {line_num}: Invalid GFF3 record, missing fields")
        return None

    try:
        start = int(fields[3])
        end = int(fields[4])
        score = None if fields[5] == '.' else float(fields[5])
    except ValueError:
        logging.warning(f"Line {line_num}: Invalid GFF3 record, bad coordinates or score")
        return None

    return GFF3Record(
        seqid=unquote(fields[0]),
        source=fields[1],
        type=fields[2],
        start=start,
        end=end,
        score=score,
        strand=None if fields[6] == '.' else fields[6],
        phase=None if fields[7] == '.' else fields[7],
        attributes=parse_attributes(fields[8]),
    )


def iter_gff3_records(lines):
    """Yield GFF3Records from an iterable of lines, stopping at ##FASTA."""
    for line_num, line in enumerate(lines, 1):
        stripped = line.strip()
        if stripped == '##FASTA':
            break
        if not stripped or stripped.startswith('#'):
            continue

        record = parse_gff3_line(line, line_num)
        if record is not None:
            yield record


def parse_gff3(gff_file):
    """Parse a GFF3 file into a list of records."""
    start_time = time.time()
    logging.info(f"Parsing GFF3 file: {gff_file}")

    with open(gff_file, 'r') as f:
        records = list(iter_gff3_records(f))

    elapsed = time.time() - start_time
    logging.info(f"Finished parsing GFF3 in {elapsed:.2f}s: {len(records)} records")

    return records
