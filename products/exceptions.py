"""
Product API exception classes.

Raised by the product services and rendered by DRF's exception handler,
so every caller sees one of: 404 not found, 400 validation failed or
409 concurrency conflict.
"""

from rest_framework import status
from rest_framework.exceptions import APIException


GENERIC_SAVE_ERROR = "Unable to save changes. Try again later."


class ProductNotFound(APIException):
    """
    Raised when a product id is missing, matches no row, or the id in an
    edit payload differs from the id in the path.
    """
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Product not found.'
    default_code = 'not_found'


class ProductValidationFailed(APIException):
    """
    Raised when a create or edit form is rejected.

    Carries everything needed to show the form again: the field errors,
    the submitted input and the category choices.
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Product validation failed.'
    default_code = 'invalid'

    def __init__(self, errors, product=None, categories=None):
        self.errors = errors
        self.product = product or {}
        self.categories = list(categories or [])
        super().__init__()
        # Assigned directly so ids and prices keep their JSON types
        self.detail = {
            'errors': errors,
            'product': self.product,
            'categories': self.categories,
        }


class ConcurrencyConflict(APIException):
    """
    Raised when a product changed between the time it was read and the
    time an update was submitted. Nothing is written.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The product was modified by someone else. Reload it and try again.'
    default_code = 'conflict'

    def __init__(self, product_id, current_version=None):
        self.product_id = product_id
        self.current_version = current_version
        super().__init__()
        self.detail = {
            'detail': self.default_detail,
            'product_id': product_id,
            'current_version': current_version,
        }
