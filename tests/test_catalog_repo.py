from domain.kiosk.catalog_repo import InMemoryCatalogRepo, ProductRecord, coerce_rows, parse_number


def test_parse_number_is_lenient():
    assert parse_number(45) == 45.0
    assert parse_number("45.50") == 45.5
    assert parse_number("39 บาท") == 39.0
    assert parse_number("") is None
    assert parse_number("free") is None
    assert parse_number(None) is None
    assert parse_number(True) is None


def test_from_raw_coerces_mixed_cells():
    row = {
        "Product_Code": 1001,
        "Uniqcode": "U-1",
        "Name_TH": "ลาเต้เย็น",
        "Common_name_TH": "ลาเต้",
        "Name_EN": "Iced Latte",
        "Name_JP": "アイスラテ",
        "Category": "Coffee",
        "Type": "Iced",
        "Price": "55",
        "Sizes": "M, L",
        "Sweetness": "0,25,50,75,100",
        "Promotion_price": 49.0,
        "special_day_conditions": "Mon,Fri",
        "special_conditon": "0123, 0456",
        "Brand": "AllCafe",
        "Descrpition": "smooth",
        "Image_URL": "https://img.example/x.png",
        "Tags": "Highlight, new",
        "Unrelated": "ignored",
    }
    p = ProductRecord.from_raw(row)

    assert p.code == "1001"
    assert p.price == 55.0
    assert p.sizes == ("M", "L")
    assert p.size == "M"
    assert p.sweetness_options == ["0", "25", "50", "75", "100"]
    assert p.promotion_price_raw == "49"
    assert p.promotion_price == 49.0
    assert p.hidden_at_branches == ("0123", "0456")
    assert p.description == "smooth"
    assert p.tag_list == ["Highlight", "new"]
    assert p.conceptual_name == "ลาเต้"


def test_name_for_language_fallbacks():
    p = ProductRecord.from_raw({
        "Name_EN": "Iced Latte",
        "Name_TH": "ลาเต้เย็น",
        "Name_JP": "アイスラテ",
    })
    assert p.name_for("th") == "ลาเต้เย็น"
    assert p.name_for("jp") == "アイスラテ"
    assert p.name_for("fr") == "Iced Latte"


def test_coerce_rows_skips_non_mappings():
    records = coerce_rows([{"Product_Code": "A"}, "junk", None, {"Product_Code": "B"}])
    assert [r.code for r in records] == ["A", "B"]


def test_in_memory_repo_accepts_records_and_dicts(make_record):
    repo = InMemoryCatalogRepo([make_record(code="X"), {"Product_Code": "Y"}])
    assert [p.code for p in repo.fetch_products()] == ["X", "Y"]
