from marshmallow import Schema, fields, validates, ValidationError

from daraja.utils.validators import validate_amount, is_blank


def _not_blank(value):
    if is_blank(value):
        raise ValidationError('Field may not be blank.')


class CredentialsSchema(Schema):
    """Business credentials schema"""
    consumer_key = fields.Str(required=True, validate=_not_blank)
    consumer_secret = fields.Str(required=True, validate=_not_blank)
    business_shortcode = fields.Str(required=True, validate=_not_blank)
    passkey = fields.Str(required=True, validate=_not_blank)


class StkPushSchema(Schema):
    """STK Push transaction schema"""
    phone_number = fields.Str(required=True, validate=_not_blank)
    amount = fields.Raw(required=True)
    account_reference = fields.Str(required=True, validate=_not_blank)
    callback_url = fields.Str(required=True, validate=_not_blank)

    @validates('amount')
    def validate_amount(self, value, **kwargs):
        is_valid, error = validate_amount(value)
        if not is_valid:
            raise ValidationError(error)
