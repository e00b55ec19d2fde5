from prometheus_client import Counter, Histogram


# Product Metrics
products_created_total = Counter("marketplace_products_created_total", "Total products created", ["status"])
products_deleted_total = Counter("marketplace_products_deleted_total", "Total products deleted")
product_images_removed_total = Counter("marketplace_product_images_removed_total", "Image files removed with products")

# Discovery Metrics
product_queries_total = Counter("marketplace_product_queries_total", "Product page queries", ["mode"])
product_query_duration = Histogram("marketplace_product_query_seconds", "Product page query time", ["mode"])
product_search_total = Counter("marketplace_product_search_total", "Product text searches", ["status"])
