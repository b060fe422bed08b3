"""Extract WieWasWie source detail pages into the dict the WieWasWie reader takes."""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, Tag


def _make_list(list_element: Tag | None) -> list[dict[str, str]]:
    """Turn a <dl> of paired <dt>/<dd> elements into label/value/dataKey fields."""
    if list_element is None:
        return []
    dts = list_element.find_all("dt")
    dds = list_element.find_all("dd")
    if len(dts) != len(dds):
        return []

    fields = []
    for dt, dd in zip(dts, dds):
        item: dict[str, str] = {}
        label = dt.get_text(strip=True)
        value = dd.get_text(" ", strip=True)
        data_key = dt.get("data-dictionary")
        if label:
            item["label"] = label
        if value:
            item["value"] = value
        if data_key:
            item["dataKey"] = str(data_key).strip()
        fields.append(item)
    return fields


def extract_data(html: str, url: str | None = None) -> dict[str, Any]:
    """Extract a WieWasWie source detail page into reader input.

    Best-effort: ``success`` is False when the page does not have the
    expected source detail layout.
    """
    result: dict[str, Any] = {"success": False}
    if url:
        result["url"] = url

    soup = BeautifulSoup(html, "html.parser")
    title = soup.find("title")
    if title:
        result["title"] = title.get_text(strip=True)

    container = soup.select_one("body > div.sourcedetail-themepage")
    if container is None:
        return result
    row = container.select_one("div.row")
    if row is None:
        return result

    result["people"] = []
    left = row.select_one("div.left-column")
    if left is not None:
        for person in left.select("div.person"):
            fields = _make_list(person.find("dl"))
            if fields:
                result["people"].append(fields)
        event = left.select_one("div.gebeurtenis")
        if event is not None:
            result["eventList"] = _make_list(event.find("dl"))

    right = row.select_one("div.right-column")
    if right is not None:
        result["sourceList"] = _make_list(right.find("dl"))
        link = right.find("a", href=lambda h: h and h.startswith("http") and "wiewaswie.nl" not in h)
        if link is not None:
            result["originalSourceLink"] = link["href"]

    result["success"] = True
    return result
