"""GraphQL schema: queries and mutations over products and carts.

Resolvers are thin: they build the matching application handler from
the repositories in ``info.context`` (a ShopContext) and return its DTO.
"""

from __future__ import annotations

import graphene
from graphql import ExecutionResult

from shopql.application.add_product_to_cart import AddProductToCartHandler
from shopql.application.create_cart import CreateCartHandler
from shopql.application.delete_cart import DeleteCartHandler
from shopql.application.delete_product import DeleteProductHandler
from shopql.application.get_cart import GetCartHandler
from shopql.application.get_product import GetProductHandler
from shopql.application.list_products import ListProductsHandler
from shopql.application.remove_product_from_cart import (
    RemoveProductFromCartHandler,
)
from shopql.infrastructure.api.errors import translate_errors
from shopql.infrastructure.api.types import (
    CartType,
    DeleteResultType,
    ProductType,
)
from shopql.infrastructure.bootstrap import ShopContext


class Query(graphene.ObjectType):

    get_product = graphene.Field(ProductType, product_id=graphene.ID(required=True))
    get_all_products = graphene.List(ProductType)
    get_cart = graphene.Field(CartType, cart_id=graphene.ID(required=True))

    @translate_errors
    def resolve_get_product(root, info, product_id):
        return GetProductHandler(info.context.product_repo).handle(product_id)

    @translate_errors
    def resolve_get_all_products(root, info):
        return ListProductsHandler(info.context.product_repo).handle()

    @translate_errors
    def resolve_get_cart(root, info, cart_id):
        return GetCartHandler(info.context.cart_repo).handle(cart_id)


class CreateCart(graphene.Mutation):

    Output = CartType

    @translate_errors
    def mutate(root, info):
        return CreateCartHandler(info.context.cart_repo).handle()


class AddProductToCart(graphene.Mutation):
    class Arguments:
        cart_id = graphene.ID(required=True)
        product_id = graphene.ID(required=True)

    Output = CartType

    @translate_errors
    def mutate(root, info, cart_id, product_id):
        handler = AddProductToCartHandler(
            cart_repo=info.context.cart_repo,
            product_repo=info.context.product_repo,
        )
        return handler.handle(cart_id, product_id)


class DeleteProductFromCart(graphene.Mutation):
    class Arguments:
        cart_id = graphene.ID(required=True)
        cart_item_id = graphene.ID(required=True)

    Output = CartType

    @translate_errors
    def mutate(root, info, cart_id, cart_item_id):
        handler = RemoveProductFromCartHandler(info.context.cart_repo)
        return handler.handle(cart_id, cart_item_id)


class DeletedCart(graphene.Mutation):
    class Arguments:
        cart_id = graphene.ID(required=True)

    Output = DeleteResultType

    @translate_errors
    def mutate(root, info, cart_id):
        return DeleteCartHandler(info.context.cart_repo).handle(cart_id)


class DeleteProduct(graphene.Mutation):
    class Arguments:
        product_id = graphene.ID(required=True)

    Output = DeleteResultType

    @translate_errors
    def mutate(root, info, product_id):
        return DeleteProductHandler(info.context.product_repo).handle(product_id)


class Mutation(graphene.ObjectType):

    create_cart = CreateCart.Field()
    add_product_to_cart = AddProductToCart.Field()
    delete_product_from_cart = DeleteProductFromCart.Field()
    deleted_cart = DeletedCart.Field()
    delete_product = DeleteProduct.Field()


schema = graphene.Schema(query=Query, mutation=Mutation)


def execute(
    context: ShopContext,
    document: str,
    variables: dict | None = None,
) -> ExecutionResult:
    """Run a GraphQL document against the stores behind *context*."""
    return schema.execute(document, variable_values=variables, context_value=context)
