#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""Fixed feature schema of the m6A prediction model.

The level orderings below must match the ones the classifier was trained
with; categorical encoders map levels positionally.
"""

GC_CONTENT = 'gc_content'
RNA_TYPE = 'RNA_type'
RNA_REGION = 'RNA_region'
EXON_LENGTH = 'exon_length'
DISTANCE_TO_JUNCTION = 'distance_to_junction'
EVOLUTIONARY_CONSERVATION = 'evolutionary_conservation'
DNA_5MER = 'DNA_5mer'

REQUIRED_COLUMNS = [
    GC_CONTENT, RNA_TYPE, RNA_REGION, EXON_LENGTH,
    DISTANCE_TO_JUNCTION, EVOLUTIONARY_CONSERVATION, DNA_5MER,
]

NUMERIC_COLUMNS = [
    GC_CONTENT, EXON_LENGTH, DISTANCE_TO_JUNCTION, EVOLUTIONARY_CONSERVATION,
]

# Closed categorical domains (order matters)
RNA_TYPE_LEVELS = ['mRNA', 'lincRNA', 'lncRNA', 'pseudogene']
RNA_REGION_LEVELS = ['CDS', 'intron', "3'UTR", "5'UTR"]
NUCLEOTIDE_LEVELS = ['A', 'T', 'C', 'G']

CATEGORY_LEVELS = {
    RNA_TYPE: RNA_TYPE_LEVELS,
    RNA_REGION: RNA_REGION_LEVELS,
}

POSITION_PREFIX = 'nt_pos'

# Output columns appended to the input table
PROB_COLUMN = 'predicted_m6A_prob'
STATUS_COLUMN = 'predicted_m6A_status'

POSITIVE = 'Positive'
NEGATIVE = 'Negative'

DEFAULT_THRESHOLD = 0.5
