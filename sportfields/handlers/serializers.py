"""Serializers at the engine boundary.

Record serializers validate raw loader records (source key names such as
``field_code`` and ``booking_date``) and ``save()`` them into domain models.
Output serializers render domain models and the search result envelope.
"""

from decimal import Decimal

from rest_framework import serializers

from sportfields.domain import Booking, Field, FieldImage, InvalidTimeFormatError, Review, Shop
from sportfields.domain.intervals import to_minutes
from sportfields.services.query_service import SearchQuery


def _validate_time(value: str) -> str:
    try:
        to_minutes(value)
    except InvalidTimeFormatError as exc:
        raise serializers.ValidationError(exc.message) from exc
    return value


class LenientIntegerField(serializers.IntegerField):
    """Integer field that turns unparseable input into None instead of an error."""

    def to_internal_value(self, data):
        try:
            return super().to_internal_value(data)
        except serializers.ValidationError:
            return None


# Loader records


class ShopRecordSerializer(serializers.Serializer):
    shop_code = serializers.IntegerField()
    shop_name = serializers.CharField()
    address = serializers.CharField(allow_blank=True, default="")
    bank_account_number = serializers.CharField(allow_blank=True, default="")
    bank_name = serializers.CharField(allow_blank=True, default="")
    isapproved = serializers.BooleanField(default=True)

    def create(self, validated_data) -> Shop:
        return Shop(
            id=validated_data["shop_code"],
            name=validated_data["shop_name"],
            address=validated_data["address"],
            bank_account_number=validated_data["bank_account_number"],
            bank_name=validated_data["bank_name"],
            is_approved=validated_data["isapproved"],
        )


class FieldRecordSerializer(serializers.Serializer):
    field_code = serializers.IntegerField()
    shop_code = serializers.IntegerField()
    field_name = serializers.CharField(allow_blank=True)
    sport_type = serializers.CharField(allow_blank=True)
    price_per_hour = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=Decimal(0), required=False, allow_null=True
    )
    default_price_per_hour = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=Decimal(0), required=False, allow_null=True
    )
    address = serializers.CharField(allow_blank=True, default="")
    status = serializers.CharField(allow_blank=True, default="available")

    def create(self, validated_data) -> Field:
        # Some sources only carry default_price_per_hour.
        price = validated_data.get("price_per_hour")
        if price is None:
            price = validated_data.get("default_price_per_hour")
        return Field(
            id=validated_data["field_code"],
            shop_id=validated_data["shop_code"],
            name=validated_data["field_name"],
            sport_type=validated_data["sport_type"],
            price_per_hour=price if price is not None else Decimal(0),
            address=validated_data["address"],
            status=validated_data["status"],
        )


class FieldImageRecordSerializer(serializers.Serializer):
    image_code = serializers.IntegerField()
    field_code = serializers.IntegerField()
    image_url = serializers.CharField()
    sort_order = serializers.IntegerField(default=0)
    is_primary = serializers.BooleanField(default=False)

    def create(self, validated_data) -> FieldImage:
        return FieldImage(
            id=validated_data["image_code"],
            field_id=validated_data["field_code"],
            url=validated_data["image_url"],
            sort_order=validated_data["sort_order"],
            is_primary=validated_data["is_primary"],
        )


class ReviewRecordSerializer(serializers.Serializer):
    review_code = serializers.IntegerField()
    field_code = serializers.IntegerField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(allow_blank=True, default="")
    customer_name = serializers.CharField(allow_blank=True, default="")

    def create(self, validated_data) -> Review:
        return Review(
            id=validated_data["review_code"],
            field_id=validated_data["field_code"],
            rating=validated_data["rating"],
            comment=validated_data["comment"],
            customer_name=validated_data["customer_name"],
        )


class BookingRecordSerializer(serializers.Serializer):
    booking_code = serializers.IntegerField()
    field_code = serializers.IntegerField()
    booking_date = serializers.DateField()
    start_time = serializers.CharField(validators=[_validate_time])
    end_time = serializers.CharField(validators=[_validate_time])
    customer_name = serializers.CharField(allow_blank=True, default="")
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2, default=Decimal(0))
    payment_status = serializers.CharField(default="pending")

    def create(self, validated_data) -> Booking:
        return Booking(
            id=validated_data["booking_code"],
            field_id=validated_data["field_code"],
            date=validated_data["booking_date"],
            start_time=validated_data["start_time"],
            end_time=validated_data["end_time"],
            customer_name=validated_data["customer_name"],
            total_price=validated_data["total_price"],
            payment_status=validated_data["payment_status"],
        )


# Search input


class SearchQuerySerializer(serializers.Serializer):
    """Parses request-style search parameters into a SearchQuery.

    Bad pagination input is dropped rather than rejected; the engine falls
    back to its defaults.
    """

    search = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    sportType = serializers.CharField(source="sport_type", required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    priceMin = serializers.DecimalField(
        source="price_min", max_digits=14, decimal_places=2, required=False, allow_null=True
    )
    priceMax = serializers.DecimalField(
        source="price_max", max_digits=14, decimal_places=2, required=False, allow_null=True
    )
    date = serializers.DateField(required=False, allow_null=True)
    startTime = serializers.CharField(source="start_time", required=False, validators=[_validate_time])
    endTime = serializers.CharField(source="end_time", required=False, validators=[_validate_time])
    sortBy = serializers.ChoiceField(
        source="sort_by", choices=["price", "rating", "name"], required=False, allow_null=True
    )
    sortDir = serializers.ChoiceField(source="sort_dir", choices=["asc", "desc"], default="asc")
    page = LenientIntegerField(required=False, allow_null=True)
    pageSize = LenientIntegerField(source="page_size", required=False, allow_null=True)

    def create(self, validated_data) -> SearchQuery:
        return SearchQuery(**validated_data)


# Output


class ShopSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    address = serializers.CharField()
    is_approved = serializers.BooleanField()


class FieldImageSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    url = serializers.CharField()
    sort_order = serializers.IntegerField()
    is_primary = serializers.BooleanField()


class ReviewSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    rating = serializers.IntegerField()
    comment = serializers.CharField()
    customer_name = serializers.CharField()


class JoinedFieldSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    shop_id = serializers.IntegerField()
    name = serializers.CharField()
    sport_type = serializers.CharField()
    price_per_hour = serializers.DecimalField(max_digits=14, decimal_places=2)
    address = serializers.CharField()
    status = serializers.CharField()
    average_rating = serializers.FloatField()
    shop = ShopSerializer()
    images = FieldImageSerializer(many=True)
    reviews = ReviewSerializer(many=True)


class BookingSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    field_id = serializers.IntegerField()
    date = serializers.DateField()
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    customer_name = serializers.CharField()
    total_price = serializers.DecimalField(max_digits=14, decimal_places=2)
    payment_status = serializers.CharField()


class SearchFacetsSerializer(serializers.Serializer):
    sport_types = serializers.ListField(child=serializers.CharField())
    locations = serializers.ListField(child=serializers.CharField())


class SearchResultSerializer(serializers.Serializer):
    items = JoinedFieldSerializer(many=True)
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    page_size = serializers.IntegerField()
    total_pages = serializers.IntegerField()
    has_next = serializers.BooleanField()
    has_prev = serializers.BooleanField()
    facets = SearchFacetsSerializer()
