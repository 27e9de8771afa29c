from pydantic import BaseModel

from paylib.encoding import Form


class CardParams(BaseModel):
    """Card details sent inline with a request, or a token standing in for them."""

    token: str | None = None
    number: str | None = None
    month: str | None = None
    year: str | None = None
    cvc: str | None = None
    name: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None

    def append_details(self, form: Form, creating: bool) -> None:
        """
        Adds the card to a request body.

        A token takes precedence: when one is present only ``card=<token>`` is
        written and the inline details are ignored. Otherwise each set field is
        written under ``card[...]``. The number and CVC are written only when
        ``creating`` is true; pass False to edit the name, expiry or address of
        a card already on file.
        """
        if self.token:
            form.add("card", self.token)
            return

        if creating:
            if self.number is not None:
                form.add("card[number]", self.number)
            if self.cvc is not None:
                form.add("card[cvc]", self.cvc)

        fields = (
            ("name", self.name),
            ("exp_month", self.month),
            ("exp_year", self.year),
            ("address_line1", self.address1),
            ("address_line2", self.address2),
            ("address_city", self.city),
            ("address_state", self.state),
            ("address_zip", self.zip),
            ("address_country", self.country),
        )
        for key, value in fields:
            if value is not None:
                form.add(f"card[{key}]", value)


__all__ = ["CardParams"]
