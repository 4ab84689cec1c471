from varcon.annotate.sequence import cds_with_change, transcript_with_change

from ..util import make_change
from .mock import MINUS_CDS, PLUS_CDS, PLUS_UTR3, minus_transcript, non_coding_transcript, plus_transcript


class TestTranscriptWithChange:
    def test_snv(self):
        transcript = plus_transcript()
        seq = transcript_with_change(transcript, make_change(1024, 'A', 'G'))
        assert len(seq) == len(transcript.sequence)
        assert seq[23] == 'G'
        assert seq[:23] == transcript.sequence[:23]
        assert seq[24:] == transcript.sequence[24:]

    def test_intronic_change(self):
        transcript = plus_transcript()
        assert transcript_with_change(transcript, make_change(1075, 'A', 'G')) == transcript.sequence

    def test_insertion(self):
        transcript = plus_transcript()
        seq = transcript_with_change(transcript, make_change(1030, 'A', 'AT'))
        assert len(seq) == 211
        assert seq[30] == 'T'
        assert seq[31:] == transcript.sequence[30:]

    def test_intronic_insertion(self):
        transcript = plus_transcript()
        assert transcript_with_change(transcript, make_change(1075, 'A', 'AT')) == transcript.sequence

    def test_deletion(self):
        transcript = plus_transcript()
        seq = transcript_with_change(transcript, make_change(1103, 'GCTG', 'G'))
        assert len(seq) == 207
        assert seq[:53] == transcript.sequence[:53]

    def test_deletion_into_intron(self):
        transcript = plus_transcript()
        seq = transcript_with_change(transcript, make_change(1045, 'A' * 11, ''))
        # only the exonic part of the deletion is removed
        assert len(seq) == 204
        assert seq[44:] == transcript.sequence[50:]

    def test_minus_strand(self):
        transcript = minus_transcript()
        seq = transcript_with_change(transcript, make_change(1480, 'T', 'C'))
        assert seq[20:23] == 'GTG'

    def test_non_coding(self):
        transcript = non_coding_transcript()
        seq = transcript_with_change(transcript, make_change(5001, 'G', 'T'))
        assert seq[0] == 'T'


class TestCDSWithChange:
    def test_snv(self):
        seq = cds_with_change(plus_transcript(), make_change(1024, 'A', 'G'))
        assert seq == 'ATGG' + PLUS_CDS[4:]

    def test_change_outside_of_the_cds(self):
        transcript = plus_transcript()
        assert cds_with_change(transcript, make_change(1075, 'A', 'G')) == PLUS_CDS
        assert cds_with_change(transcript, make_change(1010, 'C', 'CGG')) == PLUS_CDS
        assert cds_with_change(transcript, make_change(1005, 'CCC', 'C')) == PLUS_CDS
        assert cds_with_change(transcript, make_change(1240, 'CCC', 'C')) == PLUS_CDS
        assert cds_with_change(transcript, make_change(1230, 'AGGC', 'A')) == PLUS_CDS

    def test_insertion(self):
        seq = cds_with_change(plus_transcript(), make_change(1030, 'A', 'AAAA'))
        assert len(seq) == 123
        assert seq.startswith('ATG' + 'AAA' * 10 + 'CTG')

    def test_deletion(self):
        seq = cds_with_change(plus_transcript(), make_change(1103, 'GCTG', 'G'))
        assert seq == PLUS_CDS[:33] + PLUS_CDS[36:]

    def test_to_transcript_end(self):
        transcript = plus_transcript()
        assert cds_with_change(transcript, make_change(1024, 'A', 'G'), to_transcript_end=True).endswith(PLUS_UTR3)
        assert len(cds_with_change(transcript, make_change(1030, 'A', 'AT'), to_transcript_end=True)) == 191

    def test_minus_strand(self):
        seq = cds_with_change(minus_transcript(), make_change(1480, 'T', 'C'))
        assert seq == 'G' + MINUS_CDS[1:]
