"""
Plain-text output for converted items.
"""

import sys
from collections import Counter


def _format_item(item):
    parts = [f"{item.identifier}\t{item.class_fragment()}"]
    parts.extend(f"{name}={value}" for name, value in sorted(item.attributes.items()))
    parts.extend(f"{name}->{target}" for name, target in sorted(item.references.items()))
    parts.extend(f"{name}->[{','.join(targets)}]" for name, targets in sorted(item.collections.items()))
    return "\t".join(parts)


def write_items(items, outfile=None):
    """Write one tab-separated line per item."""
    out = open(outfile, 'w') if outfile else sys.stdout
    try:
        for item in items:
            out.write(_format_item(item) + "\n")
    finally:
        if outfile:
            out.close()


def generate_conversion_report(items, outfile=None):
    """Write a summary of a conversion run: item counts and final-pass changes."""
    out = open(outfile, 'w') if outfile else sys.stdout

    class_counts = Counter(item.class_fragment() for item in items)
    renamed = [item for item in items
               if '-duplicate-' in (item.get_attribute('symbol') or '')
               or '-duplicate-' in (item.get_attribute('organismDbId') or '')]

    try:
        out.write("# FlyBase GFF3 Conversion Report\n")
        out.write("#" + "=" * 79 + "\n\n")

        out.write("## Items by Class\n")
        out.write("-" * 80 + "\n")
        for class_name, count in sorted(class_counts.items()):
            out.write(f"{class_name}: {count}\n")
        out.write(f"Total: {len(items)}\n\n")

        out.write("## Renamed Duplicates\n")
        out.write("-" * 80 + "\n")
        if renamed:
            for item in renamed:
                out.write(f"{item.identifier}: symbol={item.get_attribute('symbol')} "
                          f"organismDbId={item.get_attribute('organismDbId')}\n")
        else:
            out.write("None\n")
        out.write("\n")

        out.write("## Pseudogenes\n")
        out.write("-" * 80 + "\n")
        pseudogenes = [item for item in items if item.class_fragment() == 'Pseudogene']
        if pseudogenes:
            for item in pseudogenes:
                out.write(f"{item.identifier}: {item.get_attribute('organismDbId')}\n")
        else:
            out.write("None\n")
    finally:
        if outfile:
            out.close()
