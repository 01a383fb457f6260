"""
--------------------------------------------------------------------------------
<memealign project>
src/memealign/core/alignment.py

Site and alignment records produced from MEME "sites sorted by position
p-value" sections, plus the builder that accumulates them one section at a
time.

Module Author(s): Eric J. South
Dunlop Lab
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from Bio.Align import MultipleSeqAlignment
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from .._logging import get_logger
from ..errors import RaggedAlignmentError

_LOG = get_logger(__name__)

_MOLECULE_TYPES = {"dna": "DNA", "rna": "RNA", "protein": "protein"}


@dataclass(frozen=True, slots=True)
class Site:
    sequence_name: str
    strand: int
    start: int
    residues: str
    pvalue: Optional[float] = None
    left_flank: Optional[str] = None
    right_flank: Optional[str] = None

    def __post_init__(self) -> None:
        if self.strand not in (1, -1):
            raise ValueError(f"strand must be +1 or -1, got {self.strand!r}")
        if self.start < 1:
            raise ValueError(f"start must be >= 1, got {self.start}")
        if not self.residues:
            raise ValueError("site residues must be non-empty")

    @property
    def end(self) -> int:
        return self.start + len(self.residues) - 1

    @property
    def label(self) -> str:
        """Locatable id in the usual ``name/start-end`` form."""
        return f"{self.sequence_name}/{self.start}-{self.end}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sequence_name": self.sequence_name,
            "strand": self.strand,
            "start": self.start,
            "end": self.end,
            "residues": self.residues,
            "pvalue": self.pvalue,
            "left_flank": self.left_flank,
            "right_flank": self.right_flank,
        }


@dataclass(frozen=True, slots=True)
class MotifAlignment:
    """One finished section: sites in encounter order, scored by the motif E-value."""

    sites: tuple[Site, ...]
    score: Optional[float] = None
    source: str = "meme"
    motif_id: Optional[str] = None
    motif_label: Optional[str] = None
    width: Optional[int] = None
    nsites: Optional[int] = None
    llr: Optional[float] = None
    alphabet: Optional[str] = None
    meme_version: Optional[str] = None

    def __len__(self) -> int:
        return len(self.sites)

    def __iter__(self) -> Iterator[Site]:
        return iter(self.sites)

    def to_biopython(self) -> MultipleSeqAlignment:
        """
        Build a Biopython alignment. Each SeqRecord carries start/end/strand in
        its annotations; the E-value rides on the alignment annotations.
        """
        lengths = {len(s.residues) for s in self.sites}
        if len(lengths) > 1:
            raise RaggedAlignmentError(
                f"Motif {self.motif_id or '?'}: sites differ in length {sorted(lengths)}; "
                "cannot build a column alignment"
            )
        molecule_type = _MOLECULE_TYPES.get(self.alphabet or "")
        records: List[SeqRecord] = []
        for site in self.sites:
            annotations: Dict[str, Any] = {"start": site.start, "end": site.end, "strand": site.strand}
            if molecule_type:
                annotations["molecule_type"] = molecule_type
            records.append(
                SeqRecord(
                    Seq(site.residues),
                    id=site.label,
                    name=site.sequence_name,
                    description="",
                    annotations=annotations,
                )
            )
        msa = MultipleSeqAlignment(records)
        msa.annotations["source"] = self.source
        if self.score is not None:
            msa.annotations["evalue"] = self.score
        if self.motif_id is not None:
            msa.annotations["motif_id"] = self.motif_id
        return msa

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "motif_id": self.motif_id,
            "motif_label": self.motif_label,
            "score": self.score,
            "width": self.width,
            "nsites": self.nsites,
            "llr": self.llr,
            "alphabet": self.alphabet,
            "meme_version": self.meme_version,
            "sites": [s.to_dict() for s in self.sites],
        }


@dataclass
class AlignmentBuilder:
    """Owns the in-progress record of the currently open section."""

    alphabet: Optional[str] = None
    meme_version: Optional[str] = None
    _sites: List[Site] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._sites)

    def append(self, site: Site) -> None:
        self._sites.append(site)

    def reset(self) -> None:
        self._sites = []

    def finalize(
        self,
        score: Optional[float],
        *,
        motif_id: Optional[str] = None,
        motif_label: Optional[str] = None,
        width: Optional[int] = None,
        nsites: Optional[int] = None,
        llr: Optional[float] = None,
    ) -> MotifAlignment:
        if width is not None:
            off = [s.label for s in self._sites if len(s.residues) != width]
            if off:
                _LOG.warning("Motif %s: %d site(s) differ from declared width %d: %s", motif_id, len(off), width, off)
        aln = MotifAlignment(
            sites=tuple(self._sites),
            score=score,
            motif_id=motif_id,
            motif_label=motif_label,
            width=width,
            nsites=nsites,
            llr=llr,
            alphabet=self.alphabet,
            meme_version=self.meme_version,
        )
        self.reset()
        return aln
