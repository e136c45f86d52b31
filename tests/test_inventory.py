"""
Tests for metrics.inventory — stock value, low-stock alerts and status mix.
"""

import pytest

from report_engine.metrics.inventory import calculate_inventory_metrics


def _stock(name, current, level, cost=0):
    return {"itemName": name, "category": "Materials", "currentStock": current,
            "reorderLevel": level, "unitCost": cost}


class TestLowStock:

    def test_only_items_with_a_threshold_are_flagged(self):
        result = calculate_inventory_metrics([_stock("Glue", 5, 10), _stock("Ribbon", 5, 0)])

        assert result["low_stock_items"] == [
            {"name": "Glue", "category": "Materials", "quantity": 5.0, "min_stock": 10.0},
        ]
        assert result["stock_alerts"] == 1

    @pytest.mark.parametrize("current", [-5, 0, 3, 100])
    def test_zero_reorder_level_is_never_flagged(self, current):
        result = calculate_inventory_metrics([_stock("Ribbon", current, 0)])

        assert result["low_stock_items"] == []
        assert result["status_data"][0] == {"name": "In Stock", "value": 1}

    def test_sorted_ascending_by_quantity(self):
        items = [_stock("C", 5, 5), _stock("A", 0, 5), _stock("D", -2, 3), _stock("B", 3, 5)]

        result = calculate_inventory_metrics(items)

        assert [row["name"] for row in result["low_stock_items"]] == ["D", "A", "B", "C"]


class TestStatus:

    def test_status_counts(self):
        items = [
            _stock("out", 0, 5),
            _stock("negative", -2, 3),
            _stock("low", 3, 5),
            _stock("at-level", 5, 5),
            _stock("untracked", 0, 0),
            _stock("plenty", 50, 10),
        ]

        result = calculate_inventory_metrics(items)

        assert result["status_data"] == [
            {"name": "In Stock", "value": 2},
            {"name": "Low Stock", "value": 2},
            {"name": "Out of Stock", "value": 2},
        ]


class TestValue:

    def test_total_value_coerces_strings(self, inventory):
        # 5 x 400 + 40 x 300 + 0 x 50
        assert calculate_inventory_metrics(inventory)["total_value"] == pytest.approx(14000.0)

    def test_empty_input(self):
        assert calculate_inventory_metrics([]) == {
            "status_data": [
                {"name": "In Stock", "value": 0},
                {"name": "Low Stock", "value": 0},
                {"name": "Out of Stock", "value": 0},
            ],
            "low_stock_items": [],
            "total_value": 0.0,
            "stock_alerts": 0,
        }
