"""GraphQL object types.

Each type resolves straight off the application DTOs through graphene's
default attribute resolver; snake_case attributes are exposed camelCased.
"""

import graphene


class ProductType(graphene.ObjectType):
    class Meta:
        name = "Product"

    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    price = graphene.Float(required=True)


class CartItemType(graphene.ObjectType):
    class Meta:
        name = "CartItem"

    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    quantity = graphene.Int(required=True)
    price = graphene.Float(required=True)


class CartType(graphene.ObjectType):
    class Meta:
        name = "Cart"

    id = graphene.ID(required=True)
    items = graphene.List(graphene.NonNull(CartItemType), required=True)
    total_sum = graphene.Float(required=True)


class DeleteResultType(graphene.ObjectType):
    class Meta:
        name = "DeleteResult"

    deleted_id = graphene.ID(required=True)
    success = graphene.Boolean(required=True)
