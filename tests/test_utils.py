import io

import pandas as pd

import utils
from models import DISPLAY_COLUMNS


def test_dataframe_columns_and_rows(store):
    df = utils.subscriptions_to_dataframe(store.list())
    assert list(df.columns) == DISPLAY_COLUMNS
    assert df.iloc[0].tolist() == [
        "S0001", "Sophie Tness", "99119911", "09/25/2025", "$35.00", "Monthly", "In Progress", "Product",
    ]
    assert df.iloc[1]["Type"] == "Service"


def test_empty_dataframe_keeps_columns():
    df = utils.subscriptions_to_dataframe([])
    assert df.empty
    assert list(df.columns) == DISPLAY_COLUMNS


def test_csv_export_of_filtered_rows(store):
    data = utils.subscriptions_to_csv_bytes(store.filter("Dan"))
    df = pd.read_csv(io.BytesIO(data), dtype=str)
    assert df["ID"].tolist() == ["S0002"]
    assert df["Recurring"].tolist() == ["$35.00"]
