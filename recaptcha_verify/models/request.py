"""Outbound siteverify parameters."""

from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict

from recaptcha_verify.errors import MissingResponseError, MissingSecretError


class VerificationRequest(BaseModel):
    """Payload sent to the siteverify endpoint."""

    model_config = ConfigDict(frozen=True)

    # Shared key between the site and reCAPTCHA
    secret: str
    # Token produced by the client-side widget
    response: str
    remote_ip: str = ""

    def validate_params(self) -> None:
        """Raise if a required parameter is empty."""
        if not self.secret:
            raise MissingSecretError()
        if not self.response:
            raise MissingResponseError()

    def to_form(self) -> dict[str, str]:
        """Form fields in wire order. Call validate_params() first."""
        form = {
            "secret": self.secret,
            "response": self.response,
        }
        if self.remote_ip:
            form["remoteip"] = self.remote_ip
        return form

    def marshal(self) -> bytes:
        """Encode the form fields as application/x-www-form-urlencoded."""
        return urlencode(self.to_form()).encode("ascii")
