from typing import List, Optional

import click
from tabulate import tabulate
from gpustatus.formatting.cells import Cell

TABLE_FORMAT = "presto"


class StatusTable:
   """Rows of styled cells rendered as a borderless table.

   With a known width, the last column wraps so the table fits the terminal.
   """

   def __init__(self, color:Optional[bool]=None, width:Optional[int]=None):
      self.color = color
      self.width = width
      self.rows:List[List[Cell]] = []

   def add_row(self, row:List[Cell]):
      self.rows.append(row)

   def render(self) -> str:
      if not self.rows:
         return ""
      text = self._tabulate()
      if self.width and _widest(text) > self.width:
         overflow = _widest(text) - self.width
         last = max(len(row[-1].text) for row in self.rows)
         text = self._tabulate(last_column_width=max(last - overflow, 1))
      return text

   def _tabulate(self, last_column_width:Optional[int]=None) -> str:
      styled = self.color is not False
      data = [[cell.render(styled) for cell in row] for row in self.rows]
      maxcolwidths = None
      if last_column_width:
         maxcolwidths = [None] * (len(data[0]) - 1) + [last_column_width]
      return tabulate(data, tablefmt=TABLE_FORMAT, disable_numparse=True, maxcolwidths=maxcolwidths)


def _widest(text:str) -> int:
   return max(len(click.unstyle(line)) for line in text.splitlines())
