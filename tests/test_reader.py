import bz2
import warnings

import pandas as pd
import pytest

from fars.data.reader import (
    DATA_DIR,
    NotFoundError,
    available_years,
    load_year_table,
    make_filename,
    resolve_path,
)


class TestMakeFilename:
    def test_integer_year(self):
        assert make_filename(2013) == "accident_2013.csv.bz2"

    def test_float_is_truncated_not_rounded(self):
        assert make_filename(2013.9) == "accident_2013.csv.bz2"

    def test_numeric_string(self):
        assert make_filename("2014") == "accident_2014.csv.bz2"
        assert make_filename("2014.7") == "accident_2014.csv.bz2"

    def test_distinct_years_give_distinct_names(self):
        names = {make_filename(y) for y in range(1975, 2025)}
        assert len(names) == 50


class TestLoadYearTable:
    def test_shipped_year_loads(self):
        df = load_year_table(make_filename(2013))
        assert isinstance(df, pd.DataFrame)
        assert {"STATE", "MONTH", "LATITUDE", "LONGITUD"} <= set(df.columns)
        assert len(df) == 242

    @pytest.mark.parametrize("year", [1900, 9999, 2016])
    def test_absent_year_raises_not_found(self, year):
        with pytest.raises(NotFoundError) as excinfo:
            load_year_table(make_filename(year))
        assert "does not exist" in str(excinfo.value)
        assert excinfo.value.path == DATA_DIR / make_filename(year)

    def test_not_found_is_a_file_not_found_error(self):
        with pytest.raises(FileNotFoundError):
            load_year_table("accident_1.csv.bz2")

    def test_custom_data_dir(self, data_dir):
        df = load_year_table(make_filename(2001), data_dir=data_dir)
        assert len(df) == 4
        assert df["STATE"].tolist() == [1, 1, 1, 2]

    def test_quiet_suppresses_skipped_row_warning(self, tmp_path):
        path = tmp_path / "accident_2005.csv.bz2"
        with bz2.open(path, "wt") as fh:
            fh.write("STATE,MONTH\n1,2\n3,4,5\n6,7\n")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            quiet = load_year_table(path.name, data_dir=tmp_path, quiet=True)
        assert caught == []

        with pytest.warns(pd.errors.ParserWarning):
            loud = load_year_table(path.name, data_dir=tmp_path, quiet=False)

        pd.testing.assert_frame_equal(quiet, loud)
        assert quiet["STATE"].tolist() == [1, 6]

    def test_quiet_does_not_change_parsed_types(self, tmp_path):
        # long enough that chunked type inference would split the column
        mix = list(range(300_009)) + ["x"]
        path = tmp_path / "accident_2006.csv.bz2"
        pd.DataFrame({"MONTH": 1, "MIX": mix}).to_csv(path, index=False, compression="bz2")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            loud = load_year_table(path.name, data_dir=tmp_path, quiet=False)
        assert not [w for w in caught if issubclass(w.category, pd.errors.DtypeWarning)]

        quiet = load_year_table(path.name, data_dir=tmp_path, quiet=True)
        pd.testing.assert_frame_equal(quiet, loud)
        assert type(loud["MIX"].iloc[0]) is type(quiet["MIX"].iloc[0])

    def test_source_file_is_not_modified(self, data_dir):
        path = resolve_path(make_filename(2001), data_dir)
        before = path.read_bytes()
        load_year_table(path.name, data_dir=data_dir)
        assert path.read_bytes() == before


class TestAvailableYears:
    def test_shipped_years(self):
        assert available_years() == [2013, 2014, 2015]

    def test_custom_dir(self, data_dir):
        (data_dir / "notes.txt").write_text("ignored")
        assert available_years(data_dir) == [2001, 2002]

    def test_missing_dir(self, tmp_path):
        assert available_years(tmp_path / "nope") == []
