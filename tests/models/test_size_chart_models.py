"""Tests for size chart domain models"""
from app.models.size_chart import (
    ColumnType,
    LABEL_TYPE_DEFAULTS,
    LabelType,
    SizeChartCell,
    SizeChartColumn,
    SizeChartDocument,
    SizeChartRow,
)


class TestSizeChartCellBuild:
    """A cell keeps exactly one value representation"""

    def test_single_measurement_derives_cm(self):
        cell = SizeChartCell.build("col1", inches=34)

        assert cell.value_inches == 34
        assert cell.value_cm == 86.4
        assert cell.value_text is None
        assert cell.label_id is None

    def test_range_derives_both_cm_values(self):
        cell = SizeChartCell.build("col1", min_inches=34, max_inches=36)

        assert cell.value_min_inches == 34
        assert cell.value_max_inches == 36
        assert cell.value_min_cm == 86.4
        assert cell.value_max_cm == 91.4
        assert cell.value_inches is None

    def test_open_ended_range(self):
        cell = SizeChartCell.build("col1", min_inches=46)

        assert cell.value_min_cm == 116.8
        assert cell.value_max_inches is None
        assert cell.value_max_cm is None

    def test_label_wins_over_other_values(self):
        cell = SizeChartCell.build("col1", text="Small", inches=34, label_id="label1")

        assert cell.label_id == "label1"
        assert cell.value_text is None
        assert cell.value_inches is None

    def test_range_wins_over_single_value(self):
        cell = SizeChartCell.build("col1", inches=30, min_inches=28, max_inches=30)

        assert cell.value_inches is None
        assert cell.value_min_inches == 28

    def test_text_cell(self):
        cell = SizeChartCell.build("col1", text="One Size")
        assert cell.value_text == "One Size"
        assert not cell.is_empty()

    def test_empty_cell(self):
        assert SizeChartCell.build("col1").is_empty()

    def test_explicit_cell_id_is_kept(self):
        assert SizeChartCell.build("col1", text="x", cell_id="cell42").id == "cell42"


class TestSizeChartDocument:
    """Test the stored chart shape"""

    def test_embedded_ids_generated(self):
        column = SizeChartColumn(name="Chest", column_type=ColumnType.MEASUREMENT)
        row = SizeChartRow(cells=[SizeChartCell.build(column.id, inches=34)])

        assert column.id
        assert row.id
        assert row.cells[0].id
        assert column.id != row.id

    def test_column_type_stored_as_value(self):
        column = SizeChartColumn(name="Size", column_type=ColumnType.SIZE_LABEL, label_type=LabelType.ALPHA_SIZE)
        dumped = column.model_dump()

        assert dumped["column_type"] == "SIZE_LABEL"
        assert dumped["label_type"] == "ALPHA_SIZE"

    def test_to_mongo(self):
        document = SizeChartDocument(name="Men's Tops", slug="mens-tops")
        stored = document.to_mongo()

        assert stored["name"] == "Men's Tops"
        assert stored["is_published"] is False
        assert stored["columns"] == []
        assert stored["created_at"].tzinfo is not None
        assert "_id" not in stored

    def test_every_label_type_has_defaults(self):
        assert set(LABEL_TYPE_DEFAULTS) == set(LabelType)
