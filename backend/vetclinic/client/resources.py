"""Module: resources."""

from typing import Any

from vetclinic.client.gateway import ApiGateway

Id = int | str


class ResourceApi:
    """CRUD method table for one ``/<path>`` resource family."""

    def __init__(self, gateway: ApiGateway, path: str):
        self.gateway = gateway
        self.path = path

    async def get_all(self) -> Any:
        return await self.gateway.request(self.path)

    async def get_by_id(self, id: Id) -> Any:
        return await self.gateway.request(f"{self.path}/{id}")

    async def create(self, data: dict[str, Any]) -> Any:
        return await self.gateway.request(self.path, method="POST", body=data)

    async def update(self, id: Id, data: dict[str, Any]) -> Any:
        return await self.gateway.request(f"{self.path}/{id}", method="PUT", body=data)

    async def delete(self, id: Id) -> Any:
        return await self.gateway.request(f"{self.path}/{id}", method="DELETE")


class OwnersApi(ResourceApi):
    def __init__(self, gateway: ApiGateway):
        super().__init__(gateway, "/owners")

    async def get_owner_pets(self, id: Id) -> Any:
        return await self.gateway.request(f"{self.path}/{id}/pets")


class PetsApi(ResourceApi):
    def __init__(self, gateway: ApiGateway):
        super().__init__(gateway, "/pets")

    async def get_pet_types(self) -> Any:
        return await self.gateway.request(f"{self.path}/pet-types")


class ShopApi:
    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    async def get_products(self) -> Any:
        return await self.gateway.request("/shop/products")

    async def get_product_by_id(self, id: Id) -> Any:
        return await self.gateway.request(f"/shop/products/{id}")

    async def get_cart(self) -> Any:
        return await self.gateway.request("/shop/cart")

    async def add_to_cart(self, product_id: int, quantity: int) -> Any:
        return await self.gateway.request(
            "/shop/cart/add", method="POST", body={"productId": product_id, "quantity": quantity}
        )

    async def update_cart_item(self, item_id: int, quantity: int) -> Any:
        return await self.gateway.request(
            "/shop/cart/update", method="PUT", body={"itemId": item_id, "quantity": quantity}
        )

    async def remove_cart_item(self, item_id: int) -> Any:
        return await self.gateway.request("/shop/cart/remove", method="DELETE", body={"itemId": item_id})

    async def checkout(self) -> Any:
        return await self.gateway.request("/shop/checkout", method="POST")

    async def get_orders(self) -> Any:
        return await self.gateway.request("/shop/orders")

    async def get_order_by_id(self, id: Id) -> Any:
        return await self.gateway.request(f"/shop/orders/{id}")


class ApiClient:
    """One gateway plus a stub per resource family."""

    def __init__(self, gateway: ApiGateway | None = None):
        self.gateway = gateway or ApiGateway()
        self.owners = OwnersApi(self.gateway)
        self.pets = PetsApi(self.gateway)
        self.vaccinations = ResourceApi(self.gateway, "/vaccinations")
        self.consultations = ResourceApi(self.gateway, "/consultations")
        self.laboratory = ResourceApi(self.gateway, "/laboratory")
        self.surgery = ResourceApi(self.gateway, "/surgery")
        self.appointments = ResourceApi(self.gateway, "/appointments")
        self.shop = ShopApi(self.gateway)
