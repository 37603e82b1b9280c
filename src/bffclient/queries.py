"""GraphQL query and mutation constants for the storefront BFF."""

CUSTOMER = """
query($id: String!) {
  customer(id: $id) { id email tier }
}
"""

CATALOG_ITEMS = """
query($category: String, $limit: Int) {
  catalogItems(category: $category, limit: $limit) {
    sku name available listPrice
  }
}
"""

QUOTE_PRICE = """
query($sku: String!, $quantity: Int!) {
  quotePrice(sku: $sku, quantity: $quantity) {
    sku quantity unitPrice totalPrice
  }
}
"""

PLACE_ORDER = """
mutation($input: PlaceOrderInput!) {
  placeOrder(input: $input) { orderId status }
}
"""

SCHEDULE_RETURN = """
mutation($input: ScheduleReturnInput!) {
  scheduleReturn(input: $input) {
    returnId status updatedAt refundAmount
  }
}
"""
