from __future__ import annotations

from typing import List

from meteostats.entities import AggregatePeriod, YearlyData
from meteostats.records import AggregateRecord, PerYear, StationRecord, StatisticalParameter
from meteostats.services.normalizer import SHAPE_PARAMETERS, AggregateNormalizer, take_parameter
from meteostats.units import Celsius

PERIOD = AggregatePeriod(1981, 2010)
STATIONS = ("3195", "0076", "9434")


def make_batch(parameters) -> List[AggregateRecord]:
    batch = []
    for index, parameter in enumerate(parameters):
        for station in STATIONS:
            batch.append(
                AggregateRecord(
                    station_id=station,
                    parameter=parameter,
                    values=PerYear(january=Celsius(index), yearly=Celsius(index)),
                )
            )
    return batch


def test_average_dataset_contains_only_average_records():
    batch = make_batch([StatisticalParameter.MIN, StatisticalParameter.MAX, StatisticalParameter.AVERAGE])
    normalizer = AggregateNormalizer([StatisticalParameter.AVERAGE])

    (dataset,) = normalizer.normalize(batch, PERIOD, "2018")

    assert dataset.parameter is StatisticalParameter.AVERAGE
    assert sorted(record.station_id for record in dataset.records) == sorted(STATIONS)
    assert all(record.values.january == Celsius(2) for record in dataset.records)
    assert all(isinstance(record, StationRecord) for record in dataset.records)
    assert dataset.derived is True


def test_label_combines_period_parameter_and_origin():
    batch = make_batch([StatisticalParameter.MIN])

    (dataset,) = AggregateNormalizer([StatisticalParameter.MIN]).normalize(batch, PERIOD, "2018")

    assert dataset.label == "1981 - 2010 Minimum (2018 dataset)"


def test_partitions_are_disjoint_and_complete():
    parameters = [StatisticalParameter.MIN, StatisticalParameter.MAX, StatisticalParameter.AVERAGE]
    batch = make_batch(parameters)
    total = len(batch)

    datasets = AggregateNormalizer(parameters).normalize(batch, PERIOD, "2018")

    ids = [id(record.values) for dataset in datasets for record in dataset.records]
    assert len(ids) == total
    assert len(set(ids)) == total
    assert batch == []


def test_records_are_consumed_from_batch():
    batch = make_batch([StatisticalParameter.MIN, StatisticalParameter.SAMPLE_COUNT, StatisticalParameter.CV])

    datasets = AggregateNormalizer().normalize(batch, PERIOD, "2018")

    assert [dataset.parameter for dataset in datasets] == list(SHAPE_PARAMETERS)
    assert len(datasets[0].records) == 3
    assert all(not dataset.records for dataset in datasets[1:])
    assert {record.parameter for record in batch} == {
        StatisticalParameter.SAMPLE_COUNT,
        StatisticalParameter.CV,
    }


def test_take_parameter_leaves_other_records_in_order():
    batch = make_batch([StatisticalParameter.Q1, StatisticalParameter.Q2])

    taken = take_parameter(batch, StatisticalParameter.Q1)

    assert [record.station_id for record in taken] == list(STATIONS)
    assert [record.station_id for record in batch] == list(STATIONS)
    assert take_parameter(batch, StatisticalParameter.Q1) == []


def test_repeated_parameters_are_processed_once():
    normalizer = AggregateNormalizer([StatisticalParameter.MAX, StatisticalParameter.MAX])

    assert normalizer.parameters == (StatisticalParameter.MAX,)


def test_normalize_yearly_builds_one_dataset_per_parameter():
    data = YearlyData(
        year="2018",
        stations=[],
        metrics={
            "average_temperature": make_batch([StatisticalParameter.MIN, StatisticalParameter.AVERAGE]),
            "total_rain": make_batch([StatisticalParameter.AVERAGE]),
        },
        period=PERIOD,
    )

    results = AggregateNormalizer().normalize_yearly(data)

    assert len(results) == len(SHAPE_PARAMETERS)
    by_parameter = {result.parameter: result for result in results}
    average = by_parameter[StatisticalParameter.AVERAGE]
    assert average.derived and not average.is_aggregate
    assert average.label == "1981 - 2010 Average (2018 dataset)"
    assert average.key == "2018_1981-2010_average"
    assert len(average.metrics["average_temperature"]) == 3
    assert len(average.metrics["total_rain"]) == 3
    assert by_parameter[StatisticalParameter.MAX].metrics["total_rain"] == []


def test_normalize_yearly_passes_plain_years_through():
    data = YearlyData(year="2018", stations=[])

    assert AggregateNormalizer().normalize_yearly(data) == [data]
