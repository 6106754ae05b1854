from enum import Enum

import strawberry
from sqlalchemy import asc, desc
from sqlalchemy.sql.selectable import Select


@strawberry.enum
class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@strawberry.input
class BaseSorter:
    # Lists are newest first unless asked otherwise.
    direction: SortDirection = SortDirection.DESC

    def get_sqlalchemy_sorter(self):
        func_map = {SortDirection.ASC: asc, SortDirection.DESC: desc}
        return func_map[self.direction]

    def _add_sorters(self, query: Select) -> Select:
        raise NotImplementedError

    def add_sorters(self, query: Select) -> Select:
        return self._add_sorters(query)
