"""Human-readable descriptions for common table and column names.

Descriptions come from static, exact-match dictionaries. Lookups are
case-sensitive: ``"ID"`` does not match the ``"id"`` entry.

Only two locales are known. ``zh-TW`` has table and column dictionaries and
no fallback. ``en-US`` has a column dictionary and falls back to a titleized
column name. There is no English table dictionary, so English table
descriptions are always empty. Any other locale yields empty descriptions.
"""

from types import MappingProxyType

EN_US = "en-US"
ZH_TW = "zh-TW"

SUPPORTED_LOCALES = (EN_US, ZH_TW)

ZH_TW_TABLES = MappingProxyType({
    # Core
    "articles": "文章",
    "associations": "語言或其他關連",
    "categories": "分類",
    "configs": "設定檔",
    "languages": "語言",
    "menus": "選單",
    "migration_log": "資料庫版本管理",
    "page_templates": "頁面模版",
    "pages": "頁面",
    "rules": "權限規則",
    "sessions": "使用者會話",
    "tag_maps": "標籤對照",
    "tags": "標籤",
    "user_role_maps": "身分對照",
    "user_roles": "身分",
    "user_socials": "社群資訊",
    "users": "使用者",
    "widgets": "小工具",
    # Event booking
    "venues": "場館",
    "event_attends": "活動參與者",
    "event_member_maps": "活動主講者",
    "event_orders": "活動訂單",
    "event_plans": "活動方案",
    "event_stages": "活動梯次",
    "events": "活動",
    # Members
    "members": "成員",
    # Portfolio
    "portfolios": "作品",
    # Contact
    "contacts": "聯絡我們",
    # Firewall
    "ip_rules": "IP 規則",
    "redirects": "重導向",
    # Sequences
    "sequences": "序列號管理",
    # Attachments
    "attachments": "檔案",
    # Banners
    "banners": "橫幅",
})

ZH_TW_COLUMNS = MappingProxyType({
    "action": "行為",
    "activation": "認證碼",
    "address": "地址",
    "alias": "網址用別名",
    "allow": "允許",
    "alt": "替代文字",
    "assignee_id": "被指派人員",
    "avatar": "頭像",
    "category_id": "分類 ID",
    "code": "代碼",
    "content": "內容",
    "created": "建立時間",
    "created_by": "建立者",
    "css": "CSS",
    "data": "資料",
    "description": "介紹",
    "desc": "介紹",
    "dest": "目的位置",
    "details": "細節",
    "email": "Email",
    "enabled": "啟用",
    "end_date": "結束時間",
    "end_time": "結束時間",
    "extends": "繼承自",
    "extra": "額外資訊",
    "first_name": "名",
    "fulltext": "全文",
    "hash": "雜湊值",
    "hidden": "隱藏",
    "id": "ID",
    "identifier": "識別 ID",
    "image": "圖片",
    "intro": "簡介",
    "introtext": "摘要",
    "job_title": "職稱",
    "key": "鍵名",
    "kind": "類別",
    "language": "語言",
    "last_login": "最後登入時間",
    "last_name": "姓",
    "last_reset": "最後重設時間",
    "level": "層級",
    "lft": "左鍵",
    "link": "連結",
    "meta": "Metadata",
    "mime": "媒體類型",
    "mobile": "手機",
    "mobile_image": "手機版圖片",
    "mobile_video": "手機版影片",
    "modified": "修改時間",
    "modified_by": "修改者",
    "name": "名稱",
    "note": "備註",
    "ordering": "排序",
    "page_id": "頁面 ID",
    "params": "其他參數",
    "parent_id": "上層 ID",
    "password": "密碼",
    "path": "路徑",
    "phone": "電話",
    "position": "位置",
    "prefix": "前綴",
    "provider": "提供者",
    "range": "範圍",
    "receive_mail": "可收到系統信件",
    "registered": "註冊時間",
    "remember": "記住",
    "reset_token": "重設令牌",
    "rgt": "右鍵",
    "role_id": "身分",
    "serial": "序號",
    "sitename": "網站名稱",
    "size": "大小",
    "src": "來源位置",
    "start_date": "開始時間",
    "start_time": "開始時間",
    "state": "狀態",
    "status": "狀態代碼",
    "subtitle": "副標題",
    "subtype": "子類型",
    "tag_id": "標籤 ID",
    "target": "目標",
    "target_id": "目標 ID",
    "time": "時間",
    "title": "標題",
    "title_native": "本地標題",
    "type": "類型",
    "url": "URL",
    "user_id": "使用者",
    "username": "帳號",
    "variables": "變數",
    "verified": "已認證",
    "version": "版本",
    "video": "影片",
    "video_type": "影片類型",
    "view": "視圖",
})

EN_US_COLUMNS = MappingProxyType({
    "activation": "Activation Code",
    "alias": "URL Alias",
    "alt": "Alt Text",
    "assignee_id": "Assignee ID",
    "category_id": "Category ID",
    "created": "Created Time",
    "created_by": "Created User ID",
    "desc": "Description",
    "dest": "Destination",
    "extends": "Extends From",
    "extra": "Extra Data",
    "id": "ID",
    "last_login": "Last Login time",
    "last_reset": "Last Reset time",
    "meta": "Metadata",
    "mime": "MIME Type",
    "modified": "Modified Time",
    "modified_by": "Modified User ID",
    "page_id": "Page ID",
    "params": "Parameters",
    "parent_id": "Parent ID",
    "receive_mail": "Can receive system mail",
    "registered": "Registered Time",
    "role_id": "Role",
    "src": "Source",
    "tag_id": "Tag ID",
    "target_id": "Target ID",
    "url": "URL",
    "user_id": "User ID",
})


def titleize(name: str) -> str:
    """Turn ``snake_case`` into ``Snake Case``, leaving the rest of each word untouched."""
    words = name.replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def resolve_table_description(table_name: str, locale: str | None) -> str:
    """Return the description of a table, or an empty string."""
    if locale == ZH_TW:
        return ZH_TW_TABLES.get(table_name, "")
    return ""


def resolve_column_description(column_name: str, locale: str | None) -> str:
    """Return the description of a column, or an empty string.

    Under ``en-US`` a column missing from the dictionary is titleized, so
    the result is never empty for a non-empty name.
    """
    if locale == ZH_TW:
        return ZH_TW_COLUMNS.get(column_name, "")
    if locale == EN_US:
        return EN_US_COLUMNS.get(column_name) or titleize(column_name)
    return ""
