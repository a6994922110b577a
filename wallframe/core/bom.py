"""Bill of materials — cutting lists per section and the stock to buy."""

from __future__ import annotations
import logging

from wallframe.models import (
    BRACE_SECTION_LABEL, BillOfMaterials, BomSection, ComponentKind,
    CutListEntry, FrameComponent, StockOptions,
)
from wallframe.core.optimizer import StockOptimizer

logger = logging.getLogger(__name__)

# Sections that are bought as hardware, not docked from timber lengths.
NON_TIMBER_SECTIONS = frozenset({BRACE_SECTION_LABEL})

_KIND_ORDER = {kind: i for i, kind in enumerate(ComponentKind)}


def build_bill_of_materials(
    components: list[FrameComponent],
    options: StockOptions | None = None,
) -> BillOfMaterials:
    """Group components by section and optimise timber stock for each."""
    optimizer = StockOptimizer(options)

    grouped: dict[str, list[FrameComponent]] = {}
    for c in components:
        grouped.setdefault(c.section_label, []).append(c)

    sections: list[BomSection] = []
    for label in sorted(grouped):
        members = grouped[label]
        lengths = [round(m.derived_cut_length, 1) for m in members]
        is_timber = label not in NON_TIMBER_SECTIONS

        section = BomSection(
            section_label=label,
            is_timber=is_timber,
            cut_list=_cut_list(members),
            total_linear_length=round(sum(lengths), 1),
        )
        if is_timber:
            bins = optimizer.pack(lengths)
            section.bins = bins
            section.stock_order = optimizer.summarize(bins)

        logger.debug(
            "Section %s: %d pieces, %.0f mm, %d stock lengths",
            label, len(members), section.total_linear_length, len(section.bins),
        )
        sections.append(section)

    return BillOfMaterials(sections=sections)


def _cut_list(members: list[FrameComponent]) -> list[CutListEntry]:
    counts: dict[tuple[ComponentKind, float], int] = {}
    for m in members:
        key = (m.kind, round(m.derived_cut_length, 1))
        counts[key] = counts.get(key, 0) + 1
    ordered = sorted(counts.items(), key=lambda kv: (_KIND_ORDER[kv[0][0]], -kv[0][1]))
    return [
        CutListEntry(kind=kind, cut_length=length, count=count)
        for (kind, length), count in ordered
    ]
