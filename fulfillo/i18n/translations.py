"""
Static Translations

Two-locale string tables with text direction. Keys may be dotted to reach
nested groups, e.g. ``translate(Locale.EN, "status.PACKED")``.
"""

from typing import Any, Dict, Union

from fulfillo.domain.enums import Locale


TRANSLATIONS: Dict[str, Dict[str, Any]] = {
    "en": {
        "brandName": "FULFILLO",
        "hubTitle": "Internal Operations Hub",
        "login": "Authenticate",
        "emailLabel": "Work Email",
        "passwordLabel": "Security Key",
        "loginFailed": "Invalid credentials or account suspended.",
        "dashboard": "Dashboard",
        "orders": "Orders",
        "brands": "Brands",
        "inventory": "Inventory",
        "customers": "Customers",
        "shipping": "Shipping",
        "reports": "Finance & Reports",
        "settings": "Settings",
        "logout": "Logout",
        "welcomeBack": "Welcome back to Fulfillo Operations.",
        "joinThanks": "Your request was received. Our team will contact you very soon.",
        "stats": {
            "todayOrders": "Today's Orders",
            "pendingPack": "Pending Packaging",
            "revenue": "Settled Revenue",
            "returnRate": "Return Rate",
            "totalOrders": "Total Orders",
            "inTransit": "In Transit",
            "currentBalance": "Current Balance",
            "activeBrands": "Active Brands",
            "lowStock": "Low Stock Items",
        },
        "finance": {
            "totalEarnings": "Total Settled Earnings",
            "projected": "Projected Revenue",
            "netProfit": "Estimated Net Profit",
            "orderValue": "Avg. Order Value",
            "breakdown": "Revenue Breakdown by Brand",
            "status": "Settlement Status",
            "settled": "Settled",
            "pending": "In Transit",
            "profitMargin": "Profit Margin (25%)",
        },
        "performance": "Weekly Performance",
        "topBrands": "Top Brands",
        "recentActivity": "Recent Activity",
        "search": "Search orders...",
        "createOrder": "Create Order",
        "status": {
            "ALL": "All",
            "NEW": "New",
            "PACKAGING": "Packaging",
            "PACKED": "Packed",
            "SHIPPED": "Shipped",
            "DELIVERED": "Delivered",
            "RETURNED": "Returned",
            "EXCHANGE": "Exchange",
        },
    },
    "ar": {
        "brandName": "فلفيلو",
        "hubTitle": "مركز العمليات الداخلي",
        "login": "تسجيل الدخول",
        "emailLabel": "البريد الإلكتروني للعمل",
        "passwordLabel": "مفتاح الأمان",
        "loginFailed": "بيانات الدخول غير صحيحة أو الحساب معلق",
        "dashboard": "لوحة التحكم",
        "orders": "الطلبات",
        "brands": "العلامات التجارية",
        "inventory": "المخزون",
        "customers": "العملاء",
        "shipping": "الشحن",
        "reports": "المالية والتقارير",
        "settings": "الإعدادات",
        "logout": "تسجيل الخروج",
        "welcomeBack": "مرحباً بك مجدداً في عمليات فلفيلو.",
        "joinThanks": "تم استلام طلبك بنجاح، سيتواصل معك فريقنا قريباً جداً.",
        "stats": {
            "todayOrders": "طلبات اليوم",
            "pendingPack": "في انتظار التغليف",
            "revenue": "الإيرادات المحصلة",
            "returnRate": "معدل المرتجعات",
            "totalOrders": "إجمالي الطلبات",
            "inTransit": "قيد الشحن",
            "currentBalance": "الرصيد المستحق",
            "activeBrands": "العلامات النشطة",
            "lowStock": "أصناف منخفضة المخزون",
        },
        "finance": {
            "totalEarnings": "إجمالي الأرباح المحصلة",
            "projected": "الإيرادات المتوقعة",
            "netProfit": "صافي الربح التقديري",
            "orderValue": "متوسط قيمة الطلب",
            "breakdown": "توزيع الإيرادات حسب العلامة",
            "status": "حالة التسوية",
            "settled": "تم التحصيل",
            "pending": "قيد الشحن",
            "profitMargin": "هامش الربح (25%)",
        },
        "performance": "الأداء الأسبوعي",
        "topBrands": "أفضل العلامات التجارية",
        "recentActivity": "النشاط الأخير",
        "search": "بحث في الطلبات...",
        "createOrder": "إنشاء طلب",
        "status": {
            "ALL": "الكل",
            "NEW": "جديد",
            "PACKAGING": "جاري التغليف",
            "PACKED": "تم التغليف",
            "SHIPPED": "تم الشحن",
            "DELIVERED": "تم التوصيل",
            "RETURNED": "مرتجع",
            "EXCHANGE": "استبدال",
        },
    },
}


def text_direction(locale: Union[Locale, str]) -> str:
    """Text direction for a locale: rtl for Arabic, ltr otherwise"""
    return "rtl" if Locale(locale) == Locale.AR else "ltr"


def toggle_locale(locale: Union[Locale, str]) -> Locale:
    """The other supported locale"""
    return Locale.EN if Locale(locale) == Locale.AR else Locale.AR


def translate(locale: Union[Locale, str], key: str) -> str:
    """
    Look up a string for a locale.

    Unknown keys are returned unchanged so a missing entry shows up as its
    key instead of failing the request.
    """
    node: Any = TRANSLATIONS[Locale(locale).value]
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return key
        node = node[part]
    return node if isinstance(node, str) else key
