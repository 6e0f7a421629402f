from django.shortcuts import render

SAMPLE_AMOUNTS = ["999.5", "5000", "123456.789", "1500000", "-2500000", "987654321.25"]


def showcase(request):
    """Render every desi_currency directive for a few amounts, or for ?amount=."""
    requested = request.GET.get("amount", "").strip()
    amounts = [requested] if requested else SAMPLE_AMOUNTS
    return render(request, "rupeedemo/showcase.html", {"amounts": amounts})
