"""
Demo data for a fresh database.
Inserted once, only while the users table is empty.
"""

import logging
import sqlite3

logger = logging.getLogger(__name__)

SEED_USERS = [
    # (email, password, name, phone, profile_image)
    ('jake@gmail.com', '12345', 'Jake Portacio', '09123456789', '../Assets/profile/jake.png'),
    ('enrico@gmail.com', '12345', 'Enrico Valencia', '09987654321', '../Assets/profile/enrico.jpg'),
]

SEED_PRODUCTS = [
    # (name, description, price, category, image_url, stock, colors, sizes)
    ('Classic Sofa', 'Elegant 3-seater sofa with timeless design', 14999, 'Sofas', '../Assets/sofa/ClassicSofa.jpg', 8, 'Gray,Beige,Navy', '2-Seater,3-Seater'),
    ('Harbor Sofa', 'Comfortable sofa with deep cushions', 16999, 'Sofas', '../Assets/sofa/HarborSofa.jpg', 6, 'Navy,Beige', '3-Seater'),
    ('Nova Sofa', 'Modern sofa with clean lines', 15999, 'Sofas', '../Assets/sofa/NovaSofa.jpg', 10, 'Gray,Beige,Navy', '2-Seater,3-Seater'),
    ('Terra Sofa', 'Earth-tone sofa with plush fabric', 17500, 'Sofas', '../Assets/sofa/TerraSofa.jpg', 5, 'Brown,Beige', '3-Seater'),
    ('Atlas Chair', 'Sturdy dining chair with cushioned seat', 3200, 'Chairs', '../Assets/chairs/AtlasChair.jpg', 30, 'Brown,White,Black', 'Standard'),
    ('Bloom Chair', 'Curved accent chair with soft fabric', 3800, 'Chairs', '../Assets/chairs/BloomChair.jpg', 18, 'Green,Gray', 'Standard'),
    ('Cinder Chair', 'Minimalist chair with wooden legs', 2999, 'Chairs', '../Assets/chairs/CinderChair.jpg', 22, 'Black,Gray', 'Standard'),
    ('Dune Chair', 'Cozy armchair for reading nooks', 4200, 'Chairs', '../Assets/chairs/DuneChair.jpg', 12, 'Beige,Brown', 'Standard'),
    ('Aria Bed', 'Platform bed with upholstered headboard', 24000, 'Beds', '../Assets/bed/AriaBed.jpg', 4, 'Walnut,Oak,White', 'Queen,King'),
    ('Boreal Bed', 'Solid frame bed with slatted base', 23000, 'Beds', '../Assets/bed/BorealBed.jpg', 3, 'Oak,Gray', 'Queen,King'),
    ('Cedar Bed', 'Rustic bed frame crafted from cedar', 25500, 'Beds', '../Assets/bed/CedarBed.jpg', 2, 'Cedar,White', 'Queen,King'),
    ('Delta Bed', 'Contemporary bed with storage options', 26000, 'Beds', '../Assets/bed/DeltaBed.jpg', 5, 'Walnut,Gray', 'Queen,King'),
    ('Aurora Sectional', 'Spacious L-shaped sectional', 32000, 'Sectionals', '../Assets/sectional/AuroraSectional.jpg', 3, 'Charcoal,Beige,Navy', 'Left,Right'),
    ('Beacon Sectional', 'Comfortable sectional with chaise', 30500, 'Sectionals', '../Assets/sectional/BeaconSectional.jpg', 2, 'Gray,Blue', 'Left,Right'),
    ('Cascade Sectional', 'Modular sectional for flexible layouts', 33500, 'Sectionals', '../Assets/sectional/CascadeSectional.jpg', 2, 'Beige,Charcoal', 'Modular'),
    ('Drift Sectional', 'Casual sectional with soft cushions', 29800, 'Sectionals', '../Assets/sectional/DriftSectional.jpg', 4, 'Navy,Gray', 'Left,Right'),
    ('Halo Ottoman', 'Tufted storage ottoman', 4599, 'Ottomans', '../Assets/ottoman/HaloOttoman.jpg', 20, 'Gray,Cream,Blue', 'Small,Large'),
    ('Nest Ottoman', 'Compact ottoman for extra seating', 3999, 'Ottomans', '../Assets/ottoman/NestOttoman.jpg', 25, 'Beige,Gray', 'Small,Large'),
    ('Pearl Ottoman', 'Round ottoman with elegant finish', 5299, 'Ottomans', '../Assets/ottoman/PearlOttoman.jpg', 15, 'Cream,White', 'Small,Large'),
    ('Pique Ottoman', 'Stylish ottoman with storage', 4899, 'Ottomans', '../Assets/ottoman/PiqueOttoman.jpg', 18, 'Gray,Blue', 'Small,Large'),
    ('Brio Dining Table', 'Sleek dining table for family meals', 20000, 'Tables', '../Assets/table/BrioDiningTable.png', 6, 'Oak,Walnut', '4-Seater,6-Seater'),
    ('Cove Dining Table', 'Round dining table with pedestal base', 21000, 'Tables', '../Assets/table/CoveDiningTable.jpg', 5, 'White,Oak', '4-Seater,6-Seater'),
    ('Dawn Dining Table', 'Contemporary table with durable finish', 18500, 'Tables', '../Assets/table/DawnDiningTable.jpg', 7, 'Oak,White', '4-Seater'),
]

SEED_NOTIFICATIONS = [
    # (user_id, title, body, type)
    (1, 'Welcome to Furnitune! 🎉', 'Thank you for joining us. Browse our collection!', 'welcome'),
    (1, 'New Collection Available', 'Check out our latest modern furniture collection', 'promotion'),
    (1, 'Flash Sale Alert! ⚡', 'Up to 30% off on selected items. Limited time only!', 'sale'),
    (2, 'Welcome to Furnitune! 🎉', 'Thank you for joining us. Browse our collection!', 'welcome'),
    (2, 'Mid-Year Sale', 'Save up to 15% on all furniture. Shop now!', 'sale'),
]

SEED_REVIEWS = [
    # (user_id, product_id, rating, message)
    (1, 1, 5, 'Excellent quality sofa! Very comfortable and looks great in my living room.'),
    (2, 3, 5, 'Sturdy bed frame, easy to assemble. Highly recommend!'),
    (1, 7, 4, 'Great sectional sofa, but delivery took longer than expected.'),
]

RECOMPUTE_ALL_RATINGS = """
    UPDATE products SET
        rating_avg = COALESCE((SELECT AVG(rating) FROM reviews WHERE reviews.product_id = products.id), 0),
        reviews_count = (SELECT COUNT(*) FROM reviews WHERE reviews.product_id = products.id)
"""


def seed_data(conn: sqlite3.Connection) -> bool:
    """
    Insert demo users, products, notifications and reviews.

    Returns:
        True if rows were inserted, False if the database already had users
    """
    count = conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]
    if count > 0:
        logger.debug("Data already seeded")
        return False

    logger.info("Seeding initial data...")
    with conn:
        conn.executemany(
            "INSERT INTO users (email, password, name, phone, profile_image) VALUES (?, ?, ?, ?, ?)",
            SEED_USERS,
        )
        conn.executemany(
            """INSERT INTO products (name, description, price, category, image_url, stock, colors, sizes)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            SEED_PRODUCTS,
        )
        conn.executemany(
            "INSERT INTO notifications (user_id, title, body, type) VALUES (?, ?, ?, ?)",
            SEED_NOTIFICATIONS,
        )
        conn.executemany(
            "INSERT INTO reviews (user_id, product_id, rating, message) VALUES (?, ?, ?, ?)",
            SEED_REVIEWS,
        )
        # Aggregates always derive from the reviews table
        conn.execute(RECOMPUTE_ALL_RATINGS)

    logger.info(f"[OK] Seeded {len(SEED_USERS)} users and {len(SEED_PRODUCTS)} products")
    return True
