from swr_tester.config import DataPoint


def monthly_points(start_year: int, end_year: int, value=1.0) -> list[DataPoint]:
    """January of start_year through December of end_year.

    `value` is either a constant factor or a callable taking (year, month).
    """
    points = []
    for year in range(start_year, end_year + 1):
        for month in range(1, 13):
            factor = value(year, month) if callable(value) else value
            points.append(DataPoint(year, month, factor))
    return points
