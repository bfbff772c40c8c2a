"""Collections: fees, OTP and mobile money collection."""

from ..models.collections import (
    CollectionFees,
    CollectionOtpResponseData,
    GetCollectionFeesParams,
    GetCollectionOtpParams,
    GetMobileMoneyCollectionParams,
    MobileMoneyCollection,
)
from .base import BaseResource


class Collections(BaseResource):

    async def get_collection_fees(self, params: GetCollectionFeesParams) -> CollectionFees:
        return await self._fetch('get_collection_fees', 'POST', '/collections/fees', CollectionFees, params)

    async def get_collection_otp(self, params: GetCollectionOtpParams) -> str:
        """
        Send an OTP to the payer's phone.

        Returns:
            The pin id to pass back with the PIN in the collection request
        """
        data = await self._fetch(
            'get_collection_otp', 'POST', '/collections/otp', CollectionOtpResponseData, params,
        )
        return data.pin_id

    async def get_mobile_money_collection(
        self,
        params: GetMobileMoneyCollectionParams,
    ) -> MobileMoneyCollection:
        return await self._fetch(
            'get_mobile_money_collection', 'POST', '/collections/momo', MobileMoneyCollection, params,
        )
