from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.utils.text import slugify

from modules.categories.dtos import CreateCategoryDTO
from modules.categories.models import Category
from modules.categories.repositories.django_repository import CategoryDjangoRepository
from modules.categories.services import CategoryService
from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.users.dtos import CreateUserDTO, UserRoleEnum
from modules.users.exceptions import UserAlreadyExists
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.services import UserService

CATALOG = {
    ("Electronics", "Phones, computers and accessories"): [
        ("Smartphone", "6.1\" OLED, 128 GB", "699.99", "799.99", 50),
        ("Laptop 14\"", "16 GB RAM, 512 GB SSD", "1299.00", "1449.00", 20),
        ("Wireless Headphones", "Noise cancelling", "199.90", "249.90", 75),
    ],
    ("Home", "Furniture and decoration"): [
        ("Office Chair", "Ergonomic, adjustable", "349.00", "399.00", 15),
        ("Desk Lamp", "LED, dimmable", "39.90", "49.90", 120),
    ],
    ("Books", ""): [
        ("Python Cookbook", "Recipes for mastering Python 3", "45.50", "52.00", 30),
    ],
}

USERS = [
    ("admin@example.com", "Ada", "Admin", UserRoleEnum.ADMIN),
    ("ana@example.com", "Ana", "Souza", UserRoleEnum.CUSTOMER),
    ("bruno@example.com", "Bruno", "Lima", UserRoleEnum.CUSTOMER),
]


class Command(BaseCommand):
    help = "Seed database with a demo catalog (categories, products, users)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        categories, products = self._seed_catalog()
        users = self._seed_users()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"categories={categories}, "
                f"products={products}, "
                f"users={users}"
            )
        )

    def _seed_catalog(self) -> tuple[int, int]:
        self.stdout.write("Creating categories and products...")
        category_service = CategoryService(repository=CategoryDjangoRepository())
        product_service = ProductService(
            repository=ProductDjangoRepository(),
            category_repository=CategoryDjangoRepository(),
        )
        categories_created = products_created = 0

        for (name, description), items in CATALOG.items():
            category = Category.objects.filter(name=name).first()
            if category is None:
                category = category_service.create_category(
                    CreateCategoryDTO(name=name, description=description)
                )
                categories_created += 1

            for product_name, product_description, price_av, price_ap, stock in items:
                if Product.objects.filter(category=category, name=product_name).exists():
                    continue
                product_service.create_product(
                    CreateProductDTO(
                        category_id=category.id,
                        name=product_name,
                        description=product_description,
                        price_av=Decimal(price_av),
                        price_ap=Decimal(price_ap),
                        stock_quantity=stock,
                        image_url=f"https://images.example.com/{slugify(product_name)}.jpg",
                    )
                )
                products_created += 1

        self.stdout.write(self.style.SUCCESS("Creating categories and products... Done!"))
        return categories_created, products_created

    def _seed_users(self) -> int:
        self.stdout.write("Creating users...")
        service = UserService(repository=UserDjangoRepository())
        created = 0
        for email, first_name, last_name, role in USERS:
            try:
                service.create_user(
                    CreateUserDTO(
                        email=email,
                        first_name=first_name,
                        last_name=last_name,
                        role=role,
                    )
                )
            except UserAlreadyExists:
                continue
            created += 1
        self.stdout.write(self.style.SUCCESS("Creating users... Done!"))
        return created
