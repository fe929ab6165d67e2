"""Constants for Produit model field names"""


class ProduitFields:
    """Field name constants for Produit documents"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    PRICE = "price"
    CATEGORY = "category"
    IMAGE_FILE_NAME = "image_file_name"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field

    MODELED = (ID, NAME, DESCRIPTION, PRICE, CATEGORY, IMAGE_FILE_NAME)
