"""
Static prompts sent to the vision model.
Bump the version suffix when the wording changes so responses can be traced to a prompt.
"""

RECEIPT_PROMPT_V1 = """
        Analisis struk belanja ini. Ekstrak informasi berikut dalam format JSON tunggal:
        1.  `items`: Array dari semua item MAKANAN/MINUMAN. Setiap objek harus memiliki "item" (string) dan "jumlah" (number). Jika harga satuan jelas, tambahkan "harga" (number).
        2.  `subtotal_item`: Angka subtotal HANYA untuk item makanan/minuman.
        3.  `other_costs`: Array dari SEMUA biaya lain atau diskon. Setiap objek harus memiliki "name" (string, e.g., "Biaya Pengiriman", "Voucher Diskon") dan "amount" (number). Diskon harus bernilai negatif.
        4.  `total_akhir`: Angka total final yang harus dibayar.
        Berikan HANYA JSON sebagai output.
    """

RECEIPT_PROMPT = RECEIPT_PROMPT_V1
