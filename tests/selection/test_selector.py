"""Tests for station-pair filtering."""

from train_finder.selection.selector import select_trains


class TestSelectTrains:
    """Test select_trains function."""

    def test_matches_both_stations(self, make_record):
        records = [
            make_record(1, dep=1902, arr=1929),
            make_record(2, dep=1929, arr=1902),
            make_record(3, dep=1902, arr=1937),
            make_record(4, dep=1937, arr=1929),
            make_record(5, dep=1902, arr=1929),
        ]

        selected = select_trains(records, 1902, 1929)

        assert [r.train_id for r in selected] == [1, 5]

    def test_matches_exactly_the_filtered_set(self, make_record):
        """Output equals the records whose station pair matches, in source order."""
        records = [make_record(i, dep=i % 3 + 1, arr=i % 2 + 1) for i in range(30)]

        for dep in (1, 2, 3):
            for arr in (1, 2):
                expected = [r for r in records
                            if r.departure_station_id == dep and r.arrival_station_id == arr]
                assert select_trains(records, dep, arr) == expected

    def test_preserves_source_order(self, make_record):
        records = [make_record(i, price=100.0 - i) for i in (9, 3, 7, 1)]
        assert [r.train_id for r in select_trains(records, 1902, 1929)] == [9, 3, 7, 1]

    def test_no_match_is_empty(self, make_record):
        records = [make_record(1)]
        assert select_trains(records, 12, 1929) == []

    def test_empty_source(self):
        assert select_trains([], 1902, 1929) == []

    def test_accepts_any_iterable(self, make_record):
        records = (make_record(i) for i in range(3))
        assert len(select_trains(records, 1902, 1929)) == 3
