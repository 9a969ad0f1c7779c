"""
Unit tests for m6APrediction dataset module.
"""

import pandas as pd
import pytest

from m6APrediction.dataset import (
    read_feature_table, write_prediction_table, example_feature_table_path,
)
from m6APrediction.encoding import check_feature_domains
from m6APrediction.exceptions import SchemaError


class TestReadFeatureTable:

    def test_example_table(self):
        df = read_feature_table(example_feature_table_path())

        assert len(df) == 6
        assert df.loc[1, 'RNA_region'] == "3'UTR"
        assert df.loc[1, 'distance_to_junction'] == -45
        assert check_feature_domains(df).empty

    def test_tsv_separator_inferred(self, feature_df, tmp_path):
        path = tmp_path / 'features.tsv'
        feature_df.to_csv(path, sep='\t', index=False)

        df = read_feature_table(str(path))

        assert df['DNA_5mer'].tolist() == feature_df['DNA_5mer'].tolist()
        assert df['exon_length'].tolist() == feature_df['exon_length'].tolist()

    def test_numeric_coercion(self, feature_df, tmp_path):
        feature_df['gc_content'] = feature_df['gc_content'].astype(object)
        feature_df.loc[10, 'gc_content'] = 'n/a'
        path = tmp_path / 'features.csv'
        feature_df.to_csv(path, index=False)

        df = read_feature_table(str(path))

        assert pd.isna(df.loc[0, 'gc_content'])
        assert df.loc[1, 'gc_content'] == pytest.approx(0.61)

    def test_missing_column(self, feature_df, tmp_path):
        path = tmp_path / 'features.csv'
        feature_df.drop(columns=['RNA_region']).to_csv(path, index=False)

        with pytest.raises(SchemaError):
            read_feature_table(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_feature_table(str(tmp_path / 'nope.csv'))


class TestWritePredictionTable:

    def test_creates_directories(self, feature_df, tmp_path):
        out = tmp_path / 'nested' / 'out' / 'predictions.tsv'

        write_prediction_table(feature_df, str(out))

        written = pd.read_csv(out, sep='\t')
        assert list(written.columns) == list(feature_df.columns)
        assert len(written) == len(feature_df)


class TestStringColumns:

    def test_na_like_values_kept_verbatim(self, feature_df, tmp_path):
        feature_df['RNA_type'] = feature_df['RNA_type'].astype(object)
        feature_df.loc[10, 'RNA_type'] = 'NA'
        feature_df.loc[11, 'RNA_region'] = 'null'
        path = tmp_path / 'features.csv'
        feature_df.to_csv(path, index=False)

        df = read_feature_table(str(path))
        report = check_feature_domains(df)

        assert df.loc[0, 'RNA_type'] == 'NA'
        assert df.loc[1, 'RNA_region'] == 'null'
        assert set(zip(report['column'], report['value'])) == {('RNA_type', 'NA'), ('RNA_region', 'null')}

    def test_numeric_columns_still_parse_na(self, feature_df, tmp_path):
        feature_df['exon_length'] = feature_df['exon_length'].astype(object)
        feature_df.loc[12, 'exon_length'] = 'NA'
        path = tmp_path / 'features.csv'
        feature_df.to_csv(path, index=False)

        df = read_feature_table(str(path))

        assert pd.isna(df.loc[2, 'exon_length'])
        assert df.loc[3, 'exon_length'] == 1204
