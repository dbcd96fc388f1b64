"""Pytest configuration and fixtures for OPCGDB tests."""

from typing import Any, Callable, Dict, Iterable, Optional

import pytest

from opcgdb.classes.card_record import CardRecord

CardEntryBuilder = Callable[..., str]
CardListPageBuilder = Callable[[Iterable[str]], str]


@pytest.fixture
def card_entry_html() -> CardEntryBuilder:
    """
    Build one <dl class="modalCol"> card entry as the card list prints it.

    Every field defaults to a valid Leader; pass keyword overrides to
    change a value, or trigger=None to leave the trigger block out.
    """

    def _build(
        identifier: str = "OP01-001",
        rarity: str = "L",
        kind: str = "LEADER",
        name: str = "Roronoa Zoro",
        image_src: Optional[str] = None,
        cost_header: str = "Life",
        cost: str = "5",
        attribute: str = "Slash",
        power: str = "5000",
        counter: str = "-",
        color: str = "Red",
        feature: str = "Supernovas/Straw Hat Crew",
        effect: str = "[DON!! x1] [Your Turn] All of your Characters gain +1000 power.",
        trigger: Optional[str] = "-",
    ) -> str:
        if image_src is None:
            image_src = f"../images/cardlist/card/{identifier}.png?240628"
        trigger_block = (
            f'<div class="trigger"><h3>Trigger</h3>{trigger}</div>'
            if trigger is not None
            else ""
        )
        return f"""
        <dl class="modalCol" id="{identifier}">
          <dt>
            <div class="infoCol">
              <span>{identifier}</span> | <span>{rarity}</span> | <span>{kind}</span>
            </div>
            <div class="cardName">{name}</div>
          </dt>
          <dd>
            <div class="frontCol">
              <img class="lazy" src="../images/common/noimage.png" data-src="{image_src}" alt="{name}">
            </div>
            <div class="backCol">
              <div class="col2">
                <div class="cost"><h3>{cost_header}</h3>{cost}</div>
                <div class="attribute">
                  <h3>Attribute</h3>
                  <img src="../images/cardlist/attribute/ico_type01.png" alt="{attribute}">
                  <i>{attribute}</i>
                </div>
                <div class="power"><h3>Power</h3>{power}</div>
                <div class="counter"><h3>Counter</h3>{counter}</div>
              </div>
              <div class="color"><h3>Color</h3>{color}</div>
              <div class="feature"><h3>Type</h3>{feature}</div>
              <div class="text"><h3>Effect</h3>{effect}</div>
              {trigger_block}
              <div class="getInfo"><h3>Card Set(s)</h3>-ROMANCE DAWN- [OP01]</div>
            </div>
          </dd>
        </dl>
        """

    return _build


@pytest.fixture
def card_list_page_html() -> CardListPageBuilder:
    """Wrap card entries in the page layout the card list serves."""

    def _build(entries: Iterable[str]) -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>CARD LIST</title></head>
<body id="cardlist">
  <header class="siteHeader"></header>
  <div class="mainCol">
    <article>
      <div class="contentsWrap isIndex">
        <div class="searchCol"><form></form></div>
        <div class="resultCol">
          {"".join(entries)}
        </div>
      </div>
    </article>
  </div>
</body>
</html>
"""

    return _build


@pytest.fixture
def make_card_record() -> Callable[..., CardRecord]:
    """Build a valid CardRecord, overriding any output field by its key."""

    def _build(**overrides: Any) -> CardRecord:
        identifier = overrides.get("id", "OP01-001")
        fields: Dict[str, Any] = {
            "id": identifier,
            "rarity": "L",
            "ty": "LEADER",
            "name": "Roronoa Zoro",
            "image_url": f"../images/cardlist/card/{identifier}.png",
            "image_name": f"{identifier}.png",
            "cost_life": 5,
            "power": 5000,
            "counter": None,
            "color": ["Red"],
            "effect": "[DON!! x1] [Your Turn] All of your Characters gain +1000 power.",
            "trigger": None,
            "subtype": ["Supernovas", "Straw Hat Crew"],
            "attribute": ["Slash"],
        }
        fields.update(overrides)
        return CardRecord.model_validate(fields)

    return _build
